import pytest

from find_engine.runtime import telemetry


def test_env_flag_reads_prefixed_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIND_ENGINE_NO_COLOR", "On")

    assert telemetry.env_flag("NO_COLOR", False) is True


def test_env_flag_falls_back_on_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIND_ENGINE_NO_COLOR", "  ")

    assert telemetry.env_flag("NO_COLOR", True) is True


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError, match="performance"):
        telemetry.configure(preset="performance")


def test_preset_and_config_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")
