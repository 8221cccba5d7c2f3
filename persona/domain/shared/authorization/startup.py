"""Startup validation for handler and policy declarations."""

import logging

from persona.domain.shared.authorization.gate import Gate
from persona.domain.shared.authorization.policy_set import POLICY_SET
from persona.domain.shared.error import ConfigurationError
from persona.domain.shared.handler import concrete_handlers

logger = logging.getLogger(__name__)


def validate_all_handlers() -> None:
    """Scan every concrete CommandHandler and QueryHandler subclass.

    Raises ConfigurationError listing all handlers without an ``__auth__`` gate,
    or when an Action has no policy rule.
    """
    violations = [
        f"Handler {cls.__module__}.{cls.__name__} has no __auth__ declaration"
        for cls in concrete_handlers()
        if not isinstance(getattr(cls, "__auth__", None), Gate)
    ]
    if violations:
        raise ConfigurationError(
            f"Authorization validation failed for {len(violations)} handler(s):\n"
            + "\n".join(f"  - {v}" for v in violations)
        )

    POLICY_SET.validate_coverage()
    logger.info("Authorization startup validation passed for all handlers")
