import sys
from pathlib import Path

import pytest

from gsearch._config import Config

# Ensure local source package (src/gsearch) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("GSEARCH_API_KEY", raising=False)
    monkeypatch.delenv("GSEARCH_REFERER", raising=False)
    monkeypatch.delenv("GSEARCH_TIMEOUT", raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def web_base_address() -> str:
    return "http://ajax.googleapis.com/ajax/services/search/web"


@pytest.fixture
def referer() -> str:
    return "http://example.com/search-page"


@pytest.fixture
def config(referer: str) -> Config:
    return Config(referer=referer)
