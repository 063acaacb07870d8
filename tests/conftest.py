import pytest

from hashqr import FORCE_SAVE_ENV


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every test in a fresh directory with the save override unset."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(FORCE_SAVE_ENV, raising=False)
    return tmp_path
