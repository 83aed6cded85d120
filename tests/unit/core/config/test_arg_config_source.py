import logging
from unittest.mock import Mock

import pytest
from configargs.constants import ConfigSourceName, ConfigSourceOrdinal
from configargs.core.common.exceptions import ConfigurationError, MalformedArgumentError
from configargs.core.config.arg_config_source import ArgumentPropertySource


@pytest.mark.parametrize("raw", [None, "", "  "])
def test_no_arguments(raw: str | None) -> None:
    source = ArgumentPropertySource(raw)

    assert dict(source.get_properties()) == {}
    assert source.get_value("kc.http.enabled") is None


def test_registration() -> None:
    source = ArgumentPropertySource()

    assert source.name == ConfigSourceName.CLI.value == "CliConfigSource"
    assert source.ordinal == ConfigSourceOrdinal.CLI == 500


def test_dashed_lookup_is_translated_to_dotted_key() -> None:
    source = ArgumentPropertySource("--http-enabled=true")

    assert source.get_value("kc-http-enabled") == "true"
    assert source.get_value("kc.http-enabled") == "true"
    assert source.get_value("kc.http.enabled") == "true"


def test_unrelated_key_is_not_found() -> None:
    source = ArgumentPropertySource("--http-enabled=true")

    assert source.get_value("kc.http.port") is None
    assert source.get_value("kc.http") is None
    assert source.get_value("http.enabled") is None


def test_connection_url_value() -> None:
    source = ArgumentPropertySource("--db-url=jdbc:mariadb://localhost/kc?a=1")

    assert source.get_value("kc-db-url") == "jdbc:mariadb://localhost/kc?a=1"
    assert (
        source.get_properties()["quarkus.datasource.jdbc.url"]
        == "jdbc:mariadb://localhost/kc?a=1"
    )


def test_bare_flags_are_reported() -> None:
    source = ArgumentPropertySource("--http-enabled,--db=postgres")

    assert source.skipped_arguments == ("--http-enabled",)
    assert source.get_value("kc-http-enabled") is None
    assert source.get_value("kc-db") == "postgres"


def test_missing_prefix_aborts_construction() -> None:
    with pytest.raises(MalformedArgumentError) as exc_info:
        ArgumentPropertySource("--db=postgres,http-enabled=true")

    assert exc_info.value.token == "http-enabled=true"
    assert exc_info.value.position == 1
    assert exc_info.value.details["token"] == "http-enabled=true"


def test_empty_key_aborts_construction() -> None:
    with pytest.raises(ConfigurationError, match="Invalid argument key"):
        ArgumentPropertySource("--=true")


def test_rejected_arguments_are_raised_not_logged_as_errors(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.DEBUG), pytest.raises(MalformedArgumentError):
        ArgumentPropertySource("--db=postgres,db-password=NOT-A-REAL-PASSWORD")

    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert "NOT-A-REAL-PASSWORD" not in caplog.text


def test_properties_are_read_only() -> None:
    source = ArgumentPropertySource("--a=1")

    with pytest.raises(TypeError):
        source.get_properties()["kc.a"] = "2"  # type: ignore[index]


def test_collaborators_are_called_once_per_argument() -> None:
    alias_mapper = Mock(side_effect=lambda key: key)
    normalizer = Mock(side_effect=lambda key: key.replace("-", "."))

    source = ArgumentPropertySource(
        "--a-b=1,--c=2,--flag", alias_mapper=alias_mapper, normalizer=normalizer
    )

    assert alias_mapper.call_count == 2
    assert normalizer.call_count == 2
    assert set(source.get_property_names()) == {"kc.a-b", "kc.a.b", "kc.c"}


def test_from_environment(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    monkeypatch.setenv("KC_CONFIG_ARGS", "--http-port=8180,--hostname=example.org")

    source = ArgumentPropertySource.from_environment()

    assert source.get_value("kc-http-port") == "8180"
    assert source.get_properties()["kc.spi.hostname.default.hostname"] == "example.org"


def test_from_environment_without_arguments(clean_env: None) -> None:
    source = ArgumentPropertySource.from_environment()

    assert len(source.get_properties()) == 0
