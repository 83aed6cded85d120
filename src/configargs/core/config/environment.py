"""Access to the raw command-line arguments handed over through the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping, Sequence

from dotenv import find_dotenv, load_dotenv

from configargs.constants import ARG_SPLIT, CONFIG_ARGS_ENV_VAR

logger = logging.getLogger(__name__)


def get_config_args(environ: MutableMapping[str, str] | None = None) -> str | None:
    """Return the comma-separated argument list, or None when none was passed.

    When reading the process environment, a ``.env`` file in the working
    directory is loaded first; variables already set take precedence over it.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        environ = os.environ
    return environ.get(CONFIG_ARGS_ENV_VAR)


def set_config_args(
    args: Sequence[str], environ: MutableMapping[str, str] | None = None
) -> None:
    """Store ``args`` so a re-invoked process can rebuild its configuration.

    ``["--http-port=8180", "--db=postgres"]`` is stored as
    ``--http-port=8180,--db=postgres``. An empty sequence clears the variable.
    """
    target = os.environ if environ is None else environ
    if not args:
        target.pop(CONFIG_ARGS_ENV_VAR, None)
        return
    target[CONFIG_ARGS_ENV_VAR] = ARG_SPLIT.join(args)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Stored %d command-line arguments in %s", len(args), CONFIG_ARGS_ENV_VAR)
