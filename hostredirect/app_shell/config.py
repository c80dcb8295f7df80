import logging

from hostredirect.components.mapping.adapters import default_environment
from hostredirect.components.mapping.ports import EnvironmentPort

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


class InvalidLogLevelError(ValueError):
    """Raised when a log level name is not one logging understands."""


def resolve_log_level(
    log_level: str | None,
    env: EnvironmentPort = default_environment,
) -> int:
    """
    Resolve the CLI log level: explicit value, then $LOG_LEVEL, then INFO.

    Any name logging knows is accepted, including aliases such as WARN.

    Raises:
        InvalidLogLevelError: If logging has no level by that name.
    """
    name = log_level or env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    name = name.strip().upper()

    levels = logging.getLevelNamesMapping()
    if name not in levels:
        raise InvalidLogLevelError(
            f"Invalid log level {name!r}; expected one of {', '.join(sorted(levels))}"
        )

    return levels[name]
