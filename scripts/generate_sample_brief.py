"""Write a demo brief as .txt, .pdf and .docx under sample/ for trying the upload flow."""

from pathlib import Path

BRIEF_LINES = [
    "IN THE UNITED STATES DISTRICT COURT FOR THE NORTHERN DISTRICT OF CALIFORNIA",
    "DEFENDANT'S MOTION TO DISMISS",
    "Courts have uniformly held that such clauses are unenforceable.",
    "See Martinez v. Department of Transportation, 512 F.3d 1184 (9th Cir. 2019).",
    "Id. at 1184-85.",
    "Under Chevron, this Court must defer to the agency's reasonable interpretation of the statute.",
    "See also Smith v. Jones, 442 U.S. 735 (1979).",
    "For these reasons, the complaint should be dismissed.",
]


def main() -> None:
    try:
        from reportlab.lib.pagesizes import letter
        from reportlab.pdfgen import canvas
    except ImportError:
        raise SystemExit("Install reportlab: pip install reportlab")
    import docx

    root = Path(__file__).resolve().parent.parent
    out_dir = root / "sample"
    out_dir.mkdir(parents=True, exist_ok=True)

    (out_dir / "brief.txt").write_text("\n\n".join(BRIEF_LINES) + "\n", encoding="utf-8")

    c = canvas.Canvas(str(out_dir / "brief.pdf"), pagesize=letter)
    c.setFont("Helvetica", 10)
    y = 750
    for line in BRIEF_LINES:
        c.drawString(60, y, line)
        y -= 24
    c.save()

    document = docx.Document()
    for line in BRIEF_LINES:
        document.add_paragraph(line)
    document.save(str(out_dir / "brief.docx"))

    print(f"Wrote brief.txt, brief.pdf and brief.docx to {out_dir}")


if __name__ == "__main__":
    main()
