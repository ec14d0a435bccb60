"""Investigation report rendering (Markdown and HTML)."""

from kord.report.html import render_html_report, write_html_report
from kord.report.markdown import render_markdown_report, write_markdown_report

__all__ = [
    "render_html_report",
    "render_markdown_report",
    "write_html_report",
    "write_markdown_report",
]
