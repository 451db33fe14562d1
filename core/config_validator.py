# core/config_validator.py

from typing import List, Optional
from core.config import settings
from core.logging_config import logger
from core.policy_config import PolicyConfig, get_policy_config
from models.enums import ActionType


def validate_required_config() -> List[str]:
    """
    Validate settings the policy engine cannot run without.
    Returns list of problems.
    """
    problems = []

    if settings.POLICY_CACHE_MAX_ENTRIES <= 0:
        problems.append("POLICY_CACHE_MAX_ENTRIES must be positive")

    if settings.POLICY_GAP_LOG_MAX_ENTRIES <= 0:
        problems.append("POLICY_GAP_LOG_MAX_ENTRIES must be positive")

    return problems


def find_missing_actions(config: PolicyConfig) -> List[str]:
    """
    List resource/action pairs with no entry at all.
    These deny at runtime; an explicit empty list is the way to say "nobody".
    """
    missing = []

    for resource in config.resources():
        for action in ActionType:
            if config.lookup(resource, action) is None:
                missing.append(f"{resource}:{action.value}")

    return missing


def validate_policy_on_startup(config: Optional[PolicyConfig] = None) -> List[str]:
    """
    Validate configuration on application startup.
    Raises RuntimeError if critical config is missing.
    Compiling the policy raises PolicyConfigError for a malformed table.
    Logs warnings for configuration gaps and returns them.
    """
    problems = validate_required_config()
    if problems:
        error_msg = f"Invalid policy settings: {', '.join(problems)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    config = config if config is not None else get_policy_config()

    gaps = find_missing_actions(config)
    for gap in gaps:
        logger.warning(f"Permission config gap: {gap} has no entry (will deny)")

    logger.info(
        f"Permission policy validation passed ({len(config.resources())} resources, "
        f"{len(gaps)} gaps)"
    )
    return gaps
