import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove KC_* variables and keep a stray .env file out of the tests."""
    for name in list(os.environ):
        if name.startswith("KC_"):
            monkeypatch.delenv(name, raising=False)
    with patch(
        "configargs.core.config.environment.load_dotenv", return_value=False
    ):
        yield
