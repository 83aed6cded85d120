"""
Parsing of command-line arguments into configuration properties.

The raw input is a comma-separated list such as
``--http-enabled=true,--http-port=8180,--db=postgres``. Every argument
must start with ``--``. The key ends at the first ``=``; everything after
it is the value, so ``--db-url=jdbc:mariadb://localhost/kc?a=1`` keeps its
query string intact. Arguments without a value are skipped.

Each argument produces up to three properties: the namespaced key
(``kc.http-enabled``), its mapped name and its normalized spelling
(``kc.http.enabled``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from configargs.constants import (
    ARG_KEY_VALUE_SEPARATOR,
    ARG_PREFIX,
    ARG_SPLIT,
    NS_KEYCLOAK_PREFIX,
)
from configargs.core.common.logging_utils import redact_property_value
from configargs.core.config.property_mappers import (
    get_mapped_property_name,
    normalize_key,
)
from configargs.core.domain.arguments import (
    ArgumentParseError,
    ArgumentParseResult,
    ParsedArgument,
)

logger = logging.getLogger(__name__)

KeyMapper = Callable[[str], str]


def split_arguments(raw: str | None) -> list[str]:
    """Split the raw argument string into tokens; blank input has none.

    Trailing empty tokens are dropped, so ``--a=1,`` holds one argument.
    Empty tokens between arguments are kept and fail parsing.
    """
    if raw is None or not raw.strip():
        return []
    tokens = raw.split(ARG_SPLIT)
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def parse_token(
    token: str,
    position: int,
    namespace_prefix: str = NS_KEYCLOAK_PREFIX,
) -> ParsedArgument | ArgumentParseError | None:
    """Parse one argument.

    Returns:
        The parsed argument, an error describing why the token is malformed,
        or None for a flag without a value
    """
    if not token.startswith(ARG_PREFIX):
        return ArgumentParseError(
            token=token,
            position=position,
            reason=f"Invalid argument format [{token}], arguments must start with '{ARG_PREFIX}'",
        )

    key, separator, value = token.partition(ARG_KEY_VALUE_SEPARATOR)
    if not separator:
        return None

    name = key[len(ARG_PREFIX) :]
    if not name.strip():
        return ArgumentParseError(
            token=token, position=position, reason=f"Invalid argument key [{token}]"
        )

    return ParsedArgument(key=namespace_prefix + name, value=value, token=token)


def expand_property(
    argument: ParsedArgument,
    alias_mapper: KeyMapper = get_mapped_property_name,
    normalizer: KeyMapper = normalize_key,
) -> Iterator[tuple[str, str]]:
    """Yield the properties an argument contributes, in insertion order."""
    yield argument.key, argument.value

    alias = alias_mapper(argument.key)
    if alias != argument.key:
        yield alias, argument.value

    yield normalizer(argument.key), argument.value


def parse_arguments(
    raw: str | None,
    *,
    namespace_prefix: str = NS_KEYCLOAK_PREFIX,
    alias_mapper: KeyMapper = get_mapped_property_name,
    normalizer: KeyMapper = normalize_key,
) -> ArgumentParseResult:
    """Parse a raw argument string into a property mapping.

    Parsing stops at the first malformed argument; the returned result then
    carries the error and no properties. When a key is produced more than
    once, the last argument wins.
    """
    tokens = split_arguments(raw)
    if not tokens:
        logger.debug("No command-line arguments provided")
        return ArgumentParseResult.success({})

    properties: list[tuple[str, str]] = []
    skipped: list[str] = []

    for position, token in enumerate(tokens):
        outcome = parse_token(token, position, namespace_prefix)

        if isinstance(outcome, ArgumentParseError):
            logger.debug(
                "Rejected command-line argument #%d: %s", position, outcome.reason
            )
            return ArgumentParseResult.failure(outcome)

        if outcome is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Skipping command-line flag without value [%s]", token)
            skipped.append(token)
            continue

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Adding property [%s=%s] from command-line",
                outcome.key,
                redact_property_value(outcome.key, outcome.value),
            )
        properties.extend(expand_property(outcome, alias_mapper, normalizer))

    return ArgumentParseResult.success(dict(properties), tuple(skipped))
