"""
Tests for logging utilities.
"""

import pytest
from configargs.core.common.logging_utils import (
    is_secret_property,
    redact,
    redact_property_value,
)


class TestRedaction:
    """Test redaction functions."""

    def test_redact(self) -> None:
        assert redact("password12345678") == "pa***78"
        assert redact("key") == "***"
        assert redact("") == ""
        assert redact("password123", mask="[REDACTED]") == "pa[REDACTED]23"

    @pytest.mark.parametrize(
        "name",
        [
            "kc.db-password",
            "kc.db.password",
            "quarkus.datasource.password",
            "KC_HTTPS_KEY_STORE_PASSWORD",
            "kc.spi-admin-secret",
            "kc.token",
        ],
    )
    def test_secret_property_names(self, name: str) -> None:
        assert is_secret_property(name)

    @pytest.mark.parametrize(
        "name", ["kc.db-url", "kc.http-port", "kc.passwords-policy-file"]
    )
    def test_plain_property_names(self, name: str) -> None:
        assert not is_secret_property(name)

    def test_redact_property_value(self) -> None:
        assert redact_property_value("kc.db-password", "s3cr3t-value") == "s3***ue"
        assert redact_property_value("kc.db-url", "jdbc:h2:mem") == "jdbc:h2:mem"
        assert redact_property_value("kc.db-password", None) is None
