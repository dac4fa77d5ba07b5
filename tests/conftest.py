import pytest

from PowCalc.config_manager import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config_manager at an empty temp location so the repo config.json is never used."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("POW_CONFIG", str(path))
    return path


@pytest.fixture
def settings():
    return Settings(color=False)


@pytest.fixture
def quiet_settings():
    return Settings(quiet=True, color=False)
