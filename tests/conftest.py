import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's MAPPING_FILE / LOG_LEVEL out of tests."""
    monkeypatch.delenv("MAPPING_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
