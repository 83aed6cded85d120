import os
from pathlib import Path

import pytest
from configargs.core.config.environment import get_config_args, set_config_args


def test_get_config_args_from_mapping() -> None:
    assert get_config_args({"KC_CONFIG_ARGS": "--a=1"}) == "--a=1"
    assert get_config_args({}) is None


def test_get_config_args_from_process_environment(
    monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> None:
    monkeypatch.setenv("KC_CONFIG_ARGS", "--db=postgres")

    assert get_config_args() == "--db=postgres"


def test_get_config_args_loads_dotenv(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("KC_CONFIG_ARGS", raising=False)
    (tmp_path / ".env").write_text(
        "KC_CONFIG_ARGS=--http-port=8180\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    try:
        assert get_config_args() == "--http-port=8180"
    finally:
        os.environ.pop("KC_CONFIG_ARGS", None)


def test_process_environment_wins_over_dotenv(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("KC_CONFIG_ARGS", "--http-port=9000")
    (tmp_path / ".env").write_text(
        "KC_CONFIG_ARGS=--http-port=8180\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    assert get_config_args() == "--http-port=9000"


def test_set_config_args_round_trip() -> None:
    environ: dict[str, str] = {}

    set_config_args(["--http-port=8180", "--db=postgres"], environ)

    assert environ["KC_CONFIG_ARGS"] == "--http-port=8180,--db=postgres"
    assert get_config_args(environ) == "--http-port=8180,--db=postgres"


def test_set_config_args_clears_on_empty() -> None:
    environ = {"KC_CONFIG_ARGS": "--a=1"}

    set_config_args([], environ)

    assert "KC_CONFIG_ARGS" not in environ
