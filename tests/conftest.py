import pytest

from framesequence.core.config import set_config


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch):
    for name in ("FRAMESEQUENCE_MAX_FRAMES", "FRAMESEQUENCE_LOG_LEVEL", "FRAMESEQUENCE_SEPARATOR"):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)
