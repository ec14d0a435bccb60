"""Tests for document upload, investigation polling, page and health routes."""

import pytest

from kord.ingest import UNSUPPORTED_FILE_MESSAGE
from kord.investigation import build_sample_report


class TestExtractRoute:

    def test_txt_upload_returns_exact_contents(self, client):
        content = "MOTION IN LIMINE\n\n  Indented paragraph.\r\nLast line"
        res = client.post("/api/extract", files={"file": ("brief.txt", content.encode("utf-8"), "text/plain")})
        assert res.status_code == 200
        data = res.json()
        assert data["text"] == content
        assert data["filename"] == "brief.txt"
        assert data["char_count"] == len(content)

    def test_unsupported_extension(self, client):
        res = client.post("/api/extract", files={"file": ("brief.rtf", b"{\\rtf1}", "application/rtf")})
        assert res.status_code == 400
        assert res.json()["detail"] == UNSUPPORTED_FILE_MESSAGE

    def test_docx_upload(self, client, sample_docx_bytes):
        res = client.post("/api/extract", files={"file": ("brief.docx", sample_docx_bytes)})
        assert res.status_code == 200
        assert "Courts have uniformly held" in res.json()["text"]

    def test_corrupt_pdf(self, client):
        res = client.post("/api/extract", files={"file": ("brief.pdf", b"garbage")})
        assert res.status_code == 400
        assert res.json()["detail"].startswith("Could not read file")

    def test_too_large(self, client, settings):
        settings.max_upload_bytes = 10
        res = client.post("/api/extract", files={"file": ("brief.txt", b"x" * 11)})
        assert res.status_code == 413


class TestInvestigationRoutes:

    def test_start_and_poll_to_complete(self, client, sample_brief):
        res = client.post("/api/investigations", json={"text": sample_brief})
        assert res.status_code == 202
        started = res.json()
        assert started["status"] == "analyzing"
        assert started["current_step"] == "Parsing document structure..."
        assert started["report"] is None

        # Background task has run by the time TestClient returns (delays disabled)
        res = client.get(f"/api/investigations/{started['investigation_id']}")
        assert res.status_code == 200
        done = res.json()
        assert done["status"] == "complete"
        assert done["progress"] == 100
        assert done["report"] == build_sample_report().model_dump(mode="json")
        assert {h["issue_id"] for h in done["highlights"]} >= {"CI-1", "CI-4"}
        assert "".join(s["text"] for s in done["segments"]) == sample_brief
        marked = {s["issue_id"]: s["text"] for s in done["segments"] if s["issue_id"]}
        assert marked["CI-4"] == "Courts have uniformly held that such clauses are unenforceable"

    def test_same_report_for_different_briefs(self, client):
        reports = []
        for text in ["Brief about a lease dispute.", "A completely different employment complaint."]:
            inv_id = client.post("/api/investigations", json={"text": text}).json()["investigation_id"]
            reports.append(client.get(f"/api/investigations/{inv_id}").json()["report"])
        assert reports[0] == reports[1]
        assert reports[0]["filing_readiness"]["verdict"] == "file_with_caution"

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_blank_text_rejected(self, client, store, text):
        res = client.post("/api/investigations", json={"text": text})
        assert res.status_code == 400
        assert len(store) == 0

    def test_unknown_investigation(self, client):
        assert client.get("/api/investigations/inv_missing").status_code == 404
        assert client.get("/api/investigations/inv_missing/report").status_code == 404

    def test_report_formats(self, client, sample_brief):
        inv_id = client.post("/api/investigations", json={"text": sample_brief}).json()["investigation_id"]

        res = client.get(f"/api/investigations/{inv_id}/report")
        assert res.status_code == 200
        assert res.json()["filing_readiness"]["verdict"] == "file_with_caution"

        res = client.get(f"/api/investigations/{inv_id}/report", params={"format": "md"})
        assert res.status_code == 200
        assert res.headers["content-type"].startswith("text/markdown")
        assert "## 2. Critical Issues" in res.text

        res = client.get(f"/api/investigations/{inv_id}/report", params={"format": "html"})
        assert res.status_code == 200
        assert "<h1>" in res.text

        res = client.get(f"/api/investigations/{inv_id}/report", params={"format": "pdf"})
        assert res.status_code == 422

    def test_report_unavailable_while_analyzing(self, client, store):
        from kord.investigation import InvestigationRunner
        from kord.schemas.models import Investigation

        investigation = Investigation(investigation_id="inv_running")
        store.create(investigation)
        InvestigationRunner(store=store).start(investigation, "brief")
        res = client.get("/api/investigations/inv_running/report")
        assert res.status_code == 409


class TestPageAndHealth:

    def test_index_page(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert "KORD LEGAL" in res.text
        assert "AI Legal Brief Investigator" in res.text
        assert "Paste your legal brief, motion, or complaint here" in res.text
        assert "Cross-referencing case law databases..." in res.text

    def test_index_page_copy_and_controls(self, client):
        html = client.get("/").text
        assert 'aria-label="Voice input"' in html
        assert 'aria-label="Upload file"' in html
        assert '<meta name="description" content="Professional legal brief analysis and citation verification"/>' in html
        assert "Libre Baskerville" in html

    def test_index_page_renders_segments_and_reads_error_strings(self, client):
        html = client.get("/").text
        assert "renderDocument(investigation.segments)" in html
        assert "investigation.highlights" not in html
        assert "setError(data.detail)" not in html
        assert 'typeof detail === "string"' in html

    def test_health(self, client):
        res = client.get("/api/health")
        assert res.status_code == 200
        assert res.json()["status"] == "ok"
