"""HTML report: wrap Markdown report in styled HTML."""

from pathlib import Path

import markdown

from kord.report.markdown import render_markdown_report
from kord.schemas.models import InvestigationReport


HTML_WRAPPER = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<title>Kord Legal — Brief Investigation Report</title>
<style>
body {{ font-family: system-ui, sans-serif; max-width: 900px; margin: 0 auto; padding: 1rem; line-height: 1.5; }}
h1 {{ border-bottom: 2px solid #111; }}
h2 {{ margin-top: 1.5rem; color: #444; }}
blockquote {{ border-left: 3px solid #c0392b; margin: 0.5rem 0; padding: 0.25rem 0.75rem; background: #fdf3f2; }}
table {{ border-collapse: collapse; width: 100%; }}
th, td {{ border: 1px solid #ddd; padding: 0.5rem; text-align: left; }}
th {{ background: #f5f5f5; }}
code {{ background: #f0f0f0; padding: 0.2em 0.4em; border-radius: 3px; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def render_html_report(report: InvestigationReport, brief_name: str = "") -> str:
    """Render full report as Markdown then convert to HTML and wrap."""
    md = render_markdown_report(report, brief_name=brief_name)
    body = markdown.markdown(md, extensions=["tables", "fenced_code"])
    return HTML_WRAPPER.format(body=body)


def write_html_report(output_path: str | Path, content: str) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(content, encoding="utf-8")
