import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def clean_linkparser_env(monkeypatch):
    """Run every test against the packaged config, not the caller's shell."""

    for key in list(os.environ.keys()):
        if key.startswith("LINKPARSER_"):
            monkeypatch.delenv(key, raising=False)

    # keep a stray .env in the working tree out of the picture
    monkeypatch.setattr(
        "linkparser.utils.config_loader.load_environment",
        lambda *args, **kwargs: False,
    )

    yield
