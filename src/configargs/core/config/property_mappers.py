"""Mapping of ``kc.*`` properties to the runtime properties they configure.

A property can be spelled three ways: dotted (``kc.db.url``), as a
command-line argument (``kc.db-url``) or as an environment variable
(``KC_DB_URL``). ``get_mapped_property_name`` accepts any of them.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from configargs.constants import NS_KEYCLOAK_PREFIX
from configargs.core.interfaces.model_bases import InternalDTO

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[-_]")
_REPEATED_DOTS = re.compile(r"\.{2,}")


def normalize_key(key: str) -> str:
    """Return the lookup-friendly spelling of a property key.

    Case is folded and dashes and underscores become dots, so
    ``kc.HTTP-enabled`` and ``kc.http_enabled`` both normalize to
    ``kc.http.enabled``.
    """
    normalized = _SEPARATORS.sub(".", key.lower())
    return _REPEATED_DOTS.sub(".", normalized)


def to_cli_format(name: str) -> str:
    """``kc.db.url`` -> ``kc.db-url``"""
    if name.startswith(NS_KEYCLOAK_PREFIX):
        return NS_KEYCLOAK_PREFIX + name[len(NS_KEYCLOAK_PREFIX) :].replace(".", "-")
    return name.replace(".", "-")


def to_env_var_format(name: str) -> str:
    """``kc.db.url`` -> ``KC_DB_URL``"""
    return re.sub(r"[.\-]", "_", name).upper()


@dataclass(frozen=True)
class PropertyMapper(InternalDTO):
    """Maps one ``kc.*`` property onto the property it feeds."""

    from_: str
    to: str | None = None
    description: str = ""

    @property
    def name(self) -> str:
        return NS_KEYCLOAK_PREFIX + self.from_

    def spellings(self) -> tuple[str, str, str]:
        return (self.name, to_cli_format(self.name), to_env_var_format(self.name))

    def matches(self, key: str) -> bool:
        return key in self.spellings()

    def target(self) -> str:
        return self.to if self.to is not None else self.name


class PropertyMappers:
    """Ordered table of property mappers; the first match wins."""

    def __init__(self, mappers: Iterable[PropertyMapper] = ()) -> None:
        self._mappers: tuple[PropertyMapper, ...] = tuple(mappers)

    @property
    def mappers(self) -> tuple[PropertyMapper, ...]:
        return self._mappers

    def get_mapper(self, key: str) -> PropertyMapper | None:
        for mapper in self._mappers:
            if mapper.matches(key):
                return mapper
        return None

    def get_mapped_property_name(self, key: str) -> str:
        """Return the property ``key`` maps to, or ``key`` itself when unmapped."""
        mapper = self.get_mapper(key)
        if mapper is None:
            return key
        mapped = mapper.target()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Mapped property %s to %s", key, mapped)
        return mapped


DEFAULT_PROPERTY_MAPPERS = PropertyMappers(
    [
        PropertyMapper(
            "db", "quarkus.datasource.db-kind", "The database vendor."
        ),
        PropertyMapper(
            "db.url", "quarkus.datasource.jdbc.url", "The database JDBC URL."
        ),
        PropertyMapper(
            "db.username", "quarkus.datasource.username", "The database username."
        ),
        PropertyMapper(
            "db.password", "quarkus.datasource.password", "The database password."
        ),
        PropertyMapper("db.schema", None, "The database schema."),
        PropertyMapper(
            "db.pool.min-size",
            "quarkus.datasource.jdbc.min-size",
            "The minimum size of the connection pool.",
        ),
        PropertyMapper(
            "db.pool.max-size",
            "quarkus.datasource.jdbc.max-size",
            "The maximum size of the connection pool.",
        ),
        PropertyMapper("http.host", "quarkus.http.host", "The HTTP host."),
        PropertyMapper("http.port", "quarkus.http.port", "The HTTP port."),
        PropertyMapper("https.port", "quarkus.http.ssl-port", "The HTTPS port."),
        PropertyMapper(
            "https.certificate.file",
            "quarkus.http.ssl.certificate.file",
            "The file path to a server certificate in PEM format.",
        ),
        PropertyMapper(
            "https.certificate.key-file",
            "quarkus.http.ssl.certificate.key-file",
            "The file path to a private key in PEM format.",
        ),
        PropertyMapper(
            "hostname",
            "kc.spi.hostname.default.hostname",
            "Hostname for the server.",
        ),
        PropertyMapper(
            "proxy",
            "quarkus.http.proxy.proxy-address-forwarding",
            "The proxy address forwarding mode.",
        ),
        PropertyMapper(
            "metrics.enabled",
            "quarkus.datasource.metrics.enabled",
            "If the server should expose metrics.",
        ),
    ]
)


def get_mapped_property_name(key: str) -> str:
    return DEFAULT_PROPERTY_MAPPERS.get_mapped_property_name(key)
