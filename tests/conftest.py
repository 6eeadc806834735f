"""Root test configuration: keep catalog credentials from the developer's shell out of tests"""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Drop real DXHUB_/KBPUB_ variables so every test starts from defaults."""
    for name in ("DXHUB_KB_API_URL", "DXHUB_KB_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    for name in ("SEARCH_PATH", "OUTPUT_FILE", "API_URL", "API_KEY", "TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"KBPUB_{name}", raising=False)
