import pytest


@pytest.fixture(autouse=True)
def _run_in_tmp(tmp_path, monkeypatch):
    """Keep Logs/ and generated pages out of the working tree."""
    monkeypatch.chdir(tmp_path)
