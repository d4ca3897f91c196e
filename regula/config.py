from __future__ import annotations
import logging
import os
import sys
from typing import Optional

from regula.errors import RegulaConfigError

logger = logging.getLogger(__name__)

RECURSION_LIMIT_VAR = 'REGULA_RECURSION_LIMIT'
LOG_LEVEL_VAR = 'REGULA_LOG_LEVEL'

# Logger every module in the package hangs off
_ROOT_LOGGER = 'regula'


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise RegulaConfigError(f'{var} must be an integer, got {raw!r}') from None


def get_recursion_limit() -> Optional[int]:
    return int_from_env(RECURSION_LIMIT_VAR)


def apply_recursion_limit() -> int:
    """Raise the interpreter recursion limit to REGULA_RECURSION_LIMIT.

    Comparison recurses once per nesting level of the deeper operand, so very
    deep value trees need headroom. The limit is only ever raised, never
    lowered. Returns the limit in effect afterwards.
    """
    wanted = get_recursion_limit()
    current = sys.getrecursionlimit()
    if wanted is not None and wanted > current:
        sys.setrecursionlimit(wanted)
        logger.debug('recursion limit raised from %d to %d', current, wanted)
    return sys.getrecursionlimit()


def get_log_level() -> Optional[str]:
    raw = os.environ.get(LOG_LEVEL_VAR)
    if not raw or not raw.strip():
        return None
    return raw.strip().upper()


def configure_logging() -> None:
    level = get_log_level()
    if level is None:
        return
    try:
        logging.getLogger(_ROOT_LOGGER).setLevel(level)
    except ValueError:
        raise RegulaConfigError(f'{LOG_LEVEL_VAR} names an unknown level: {level!r}') from None
