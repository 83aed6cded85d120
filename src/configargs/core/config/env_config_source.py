from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from configargs.constants import (
    CONFIG_ARGS_ENV_VAR,
    ENV_VAR_PREFIX,
    ConfigSourceName,
    ConfigSourceOrdinal,
)
from configargs.core.config.config_source import PropertiesConfigSource
from configargs.core.config.property_mappers import normalize_key

logger = logging.getLogger(__name__)


def _collect_env_properties(environ: Mapping[str, str], prefix: str) -> dict[str, str]:
    """Map ``KC_HTTP_PORT=8180`` to ``kc.http.port=8180``."""
    properties: dict[str, str] = {}
    for name, value in environ.items():
        if not name.startswith(prefix) or name == CONFIG_ARGS_ENV_VAR:
            continue
        properties[normalize_key(name)] = value
    return properties


class EnvVarConfigSource(PropertiesConfigSource):
    """Properties taken from ``KC_*`` environment variables.

    The environment is read once, on construction.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        prefix: str = ENV_VAR_PREFIX,
    ) -> None:
        properties = _collect_env_properties(
            os.environ if environ is None else environ, prefix
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Collected %d properties from %s* environment variables",
                len(properties),
                prefix,
            )
        super().__init__(properties, ConfigSourceName.ENV.value, ConfigSourceOrdinal.ENV)

    def get_value(self, property_name: str) -> str | None:
        return super().get_value(property_name.replace("-", "."))
