"""System prompts for the proxy routes and the user-prompt template."""

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"

HOSTILE_AUDITOR_PROMPT = """You are a HOSTILE legal auditor. Your primary goal is to find reasons to DISQUALIFY this document.

STRICT PROTOCOLS:
1. Every case citation (e.g., Vol. Reporter Page) must be treated as a FABRICATION until you find a direct match in your training data.
2. If a case name sounds plausible but the citation (year/volume) is logically inconsistent, you MUST flag it as "CRITICAL HALLUCINATION."
3. Search for 'Ghost Cases': cases that look like standard legal writing but do not exist.
4. If you have any doubt, do not be helpful. Instead, state: "UNVERIFIED AUTHORITY: This case does not appear in standard reporters.\""""

INVESTIGATOR_PROMPT = """You are a meticulous litigation support analyst reviewing a legal brief before it is filed.

For the document provided:
1. List every case citation and note whether the case name, reporter, volume, page and year are mutually consistent.
2. Identify factual or legal assertions that are not supported by any cited authority.
3. Point out precedent that appears to be misused, mischaracterized, or overruled.
4. Note writing patterns typical of AI-generated text (invented quotations, generic string cites, overconfident universal claims).
5. Finish with a filing readiness verdict: SAFE TO FILE, FILE WITH CAUTION, or DO NOT FILE, with a one-paragraph justification.

Quote the exact passage for every issue you raise."""

_PREVIEW_RE = re.compile(r"DOCUMENT.*?:\n([\s\S]{0,150})")


def build_brief_prompt(text: str, filename: str | None = None, document_kind: str = "legal brief") -> str:
    """Render the user prompt that wraps a brief for the upstream model."""
    env = Environment(loader=FileSystemLoader(str(PROMPTS_DIR)), keep_trailing_newline=True)
    template = env.get_template("brief_review.j2")
    return template.render(text=text, filename=filename, document_kind=document_kind)


def document_preview(prompt: str, limit: int = 100) -> str:
    """First characters after the DOCUMENT header, for request logging."""
    match = _PREVIEW_RE.search(prompt or "")
    if not match:
        return "No match"
    return match.group(1)[:limit]
