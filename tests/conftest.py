from __future__ import annotations

from pathlib import Path

import pytest

from create_lithia_app.core.config import HOME_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_app_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep a developer's real config file out of the tests."""
    home = tmp_path / "app-home"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    return home
