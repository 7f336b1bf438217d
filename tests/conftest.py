import pytest


@pytest.fixture(autouse=True)
def no_rapidapi_key(monkeypatch):
    # Keep every test offline unless it injects its own provider key.
    monkeypatch.delenv("RAPIDAPI_KEY", raising=False)
