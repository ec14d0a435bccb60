"""Pytest configuration and shared fixtures."""

import io

import httpx
import pytest
from fastapi.testclient import TestClient

from kord.config import Settings
from kord.investigation.store import MemoryInvestigationStore


SAMPLE_BRIEF = """IN THE UNITED STATES DISTRICT COURT
FOR THE NORTHERN DISTRICT OF CALIFORNIA

PLAINTIFF'S MOTION FOR SUMMARY JUDGMENT

Courts have uniformly held that such clauses are unenforceable. See Martinez v. Department of Transportation, 512 F.3d 1184 (9th Cir. 2019). Id. at 1184-85.

Under Chevron, this Court must defer to the agency's reasonable interpretation of the statute.
"""

UPSTREAM_OK = {
    "id": "gen-123",
    "model": "mistralai/mistral-7b-instruct:free",
    "choices": [{"index": 0, "message": {"role": "assistant", "content": "UNVERIFIED AUTHORITY: ..."}}],
}


@pytest.fixture
def sample_brief() -> str:
    return SAMPLE_BRIEF


@pytest.fixture
def settings() -> Settings:
    """Settings with a key configured and no step delays; ignores .env files."""
    return Settings(
        _env_file=None,
        openrouter_api_key="sk-or-test",
        openrouter_base_url="https://openrouter.test/api/v1",
        kord_step_delay_scale=0.0,
    )


@pytest.fixture
def store() -> MemoryInvestigationStore:
    return MemoryInvestigationStore()


class UpstreamRecorder:
    """Programmable stand-in for the OpenRouter API."""

    def __init__(self):
        self.status_code = 200
        self.body: object = UPSTREAM_OK
        self.raw: bytes | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def upstream() -> UpstreamRecorder:
    return UpstreamRecorder()


@pytest.fixture
def client(settings, store, upstream):
    """TestClient with settings, store and upstream transport overridden."""
    from backend.dependencies import investigation_store, settings_dependency, upstream_transport
    from backend.main import app

    app.dependency_overrides[settings_dependency] = lambda: settings
    app.dependency_overrides[investigation_store] = lambda: store
    app.dependency_overrides[upstream_transport] = lambda: upstream.transport
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create_sample_pdf() -> bytes:
    """Create a minimal two-page PDF with brief text for parsing tests."""
    try:
        from reportlab.lib.pagesizes import letter
        from reportlab.pdfgen import canvas
    except ImportError:
        pytest.skip("reportlab not installed")
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setFont("Helvetica", 12)
    c.drawString(72, 720, "MOTION TO DISMISS")
    c.drawString(72, 690, "See Smith v. Jones, 442 U.S. 735 (1979).")
    c.showPage()
    c.setFont("Helvetica", 12)
    c.drawString(72, 720, "CONCLUSION")
    c.drawString(72, 690, "The motion should be granted.")
    c.save()
    return buf.getvalue()


@pytest.fixture(scope="session")
def sample_pdf_bytes() -> bytes:
    return _create_sample_pdf()


@pytest.fixture
def sample_pdf_path(tmp_path, sample_pdf_bytes) -> str:
    path = tmp_path / "brief.pdf"
    path.write_bytes(sample_pdf_bytes)
    return str(path)


@pytest.fixture(scope="session")
def sample_docx_bytes() -> bytes:
    """A DOCX with two paragraphs and a small table."""
    import docx

    document = docx.Document()
    document.add_paragraph("OPPOSITION TO MOTION")
    document.add_paragraph("Courts have uniformly held that such clauses are unenforceable.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Exhibit A"
    table.rows[0].cells[1].text = "Lease Agreement"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()
