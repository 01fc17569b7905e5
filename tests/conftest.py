"""
Pytest configuration and fixtures
"""
import json
import os
import tempfile
from pathlib import Path

import httpx
import pytest

# Settings are read at import time, so the environment must be in place first
_tmp_dir = Path(tempfile.mkdtemp(prefix="finmitra-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_tmp_dir / 'traces.db'}"
os.environ["LLM_PROVIDER"] = "groq"
os.environ["GROQ_API_KEY"] = "test-key"
os.environ["GROQ_BASE_URL"] = "https://llm.test/openai/v1"
os.environ["LLM_BACKOFF_SECONDS"] = "0"
os.environ["TRACE_FLOWS"] = "true"

from sqlalchemy import create_engine, delete  # noqa: E402

from finmitra.db.base import Base  # noqa: E402
from finmitra.db.models import FlowTrace  # noqa: E402

CHAT_URL = "https://llm.test/openai/v1/chat/completions"

# Plain sqlite engine on the same file, so fixtures never touch the test's event loop
sync_engine = create_engine(f"sqlite:///{_tmp_dir / 'traces.db'}")
Base.metadata.create_all(sync_engine)


def chat_reply(content) -> httpx.Response:
    """A chat-completions response whose message content is `content` (dicts are JSON-encoded)."""
    if not isinstance(content, str):
        content = json.dumps(content)
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


@pytest.fixture(autouse=True)
def clean_traces():
    with sync_engine.begin() as conn:
        conn.execute(delete(FlowTrace))
    yield


@pytest.fixture
def stored_traces():
    """Reads flow trace rows back as dicts."""
    def _read(flow: str | None = None) -> list[dict]:
        with sync_engine.connect() as conn:
            rows = conn.execute(FlowTrace.__table__.select()).mappings().all()
        return [dict(r) for r in rows if flow is None or r["flow"] == flow]
    return _read


@pytest.fixture
def mock_provider(monkeypatch):
    from finmitra.core.config import settings

    monkeypatch.setattr(settings, "LLM_PROVIDER", "mock")
    return settings


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from finmitra.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def guidance_form() -> dict:
    return {
        "age": "28",
        "income": "800000",
        "riskTolerance": "Moderate",
        "financialGoals": "Save for retirement and buy a house in 5 years",
        "investmentAmount": "10000",
        "timeHorizon": "10 years",
        "dependents": "1",
        "debt": "200000",
    }


@pytest.fixture
def guidance_reply() -> dict:
    return {
        "investmentOptions": [
            {
                "name": "Equity Mutual Funds",
                "description": "Invest in a diversified portfolio of stocks.",
                "riskLevel": "High",
                "expectedReturn": "12-15% per annum",
                "suitability": "Suitable for long-term goals like retirement.",
            },
            {
                "name": "Public Provident Fund (PPF)",
                "description": "Government-backed savings with tax benefits.",
                "riskLevel": "Low",
                "expectedReturn": "7.1% per annum",
                "suitability": "Stable base for long-term savings.",
            },
        ],
        "disclaimer": "Investments are subject to market risks.",
    }
