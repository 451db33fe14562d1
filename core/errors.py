# core/errors.py

from collections import OrderedDict
from threading import Lock

from fastapi import HTTPException

from core.config import settings
from core.logging_config import logger


class PolicyConfigError(ValueError):
    """
    Raised while compiling the static policy table.
    This is the only exception the policy engine raises, and only at startup.
    """


# -----------------------------------------------------
# Configuration gap diagnostics
# -----------------------------------------------------
# Oldest gaps are forgotten past settings.POLICY_GAP_LOG_MAX_ENTRIES
_reported_gaps: "OrderedDict[tuple, None]" = OrderedDict()
_gaps_lock = Lock()


def describe_dimension(dimension) -> str:
    """Human readable form of an action or (component_type, component_id) key."""
    if isinstance(dimension, tuple) and len(dimension) == 2:
        component_type, component_id = dimension
        return f"{component_type}:{component_id}"
    return str(dimension)


def report_configuration_gap(resource, dimension, known_resource: bool = True) -> None:
    """
    Note that a query hit a resource/dimension with no policy entry.

    The caller still denies. The first occurrence of each gap in a configured
    resource is logged as a warning so authors of new resources see it;
    repeats go to debug. Resources with no entries at all are recorded once
    per name as (resource, "*") and only logged at debug, since their names
    come straight from request paths.
    """
    if not settings.POLICY_GAP_WARNINGS:
        return

    if known_resource:
        key = (str(resource), describe_dimension(dimension))
    else:
        key = (str(resource), "*")

    with _gaps_lock:
        first_time = key not in _reported_gaps
        _reported_gaps[key] = None
        _reported_gaps.move_to_end(key)
        while len(_reported_gaps) > max(settings.POLICY_GAP_LOG_MAX_ENTRIES, 1):
            _reported_gaps.popitem(last=False)

    if first_time and known_resource:
        logger.warning(
            f"Permission config gap: no entry for '{key[0]}' / '{key[1]}' (denied)"
        )
    elif first_time:
        logger.debug(f"Permission query for unconfigured resource '{key[0]}' (denied)")
    else:
        logger.debug(f"Permission config gap (repeat): {key[0]} / {key[1]}")


def reported_gaps() -> set:
    with _gaps_lock:
        return set(_reported_gaps)


def reset_reported_gaps() -> None:
    with _gaps_lock:
        _reported_gaps.clear()


def to_http_exception(error: Exception) -> HTTPException:
    """
    Convert a policy build failure into a clean HTTPException.
    Returns (doesn't raise) so the caller can re-raise.
    """
    logger.error(f"Policy configuration error: {error}")
    return HTTPException(status_code=500, detail="Permission policy is misconfigured")
