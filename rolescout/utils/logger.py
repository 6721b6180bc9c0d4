"""
Logging infrastructure for RoleScout.

Uses Loguru for console and rotating file output. Suggestion decisions
go to a separate audit file, one line per run, keyed by talent and
audit action. Audit payloads are redacted before they are written.
"""

import sys
from typing import Any

from loguru import logger

from rolescout.utils.config import get_settings
from rolescout.utils.constants import AuditAction

# Keys whose values are replaced before a payload is logged
CREDENTIAL_KEYS = frozenset({"password", "secret", "token", "api_key", "credential", "uri"})
TALENT_ATTRIBUTE_KEYS = frozenset(
    {"gender", "ethnicity", "height", "date_of_birth", "age", "first_name", "last_name"}
)

REDACTED = "***REDACTED***"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> <level>{level:<7}</level> "
    "<cyan>{extra[name]}</cyan> {message}"
)

AUDIT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[audit_action]} | "
    "talent={extra[talent_id]} | {message}"
)


def setup_logging() -> None:
    """Install the console sink and, when file output is on, the application and audit files."""
    settings = get_settings()
    log_settings = settings.logging
    # Tracebacks show local values only on a development machine
    diagnose = settings.debug and settings.environment == "development"

    logger.remove()
    logger.configure(extra={"name": "rolescout"})

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            filter=_application_record,
            colorize=True,
            diagnose=diagnose,
        )
    if log_settings.file_output:
        _add_file_sinks(log_settings, diagnose)

    logger.bind(name=__name__).info(
        f"Logging at {log_settings.level}, file output {'on' if log_settings.file_output else 'off'}"
    )


def _add_file_sinks(log_settings: Any, diagnose: bool) -> None:
    app_log = log_settings.file_path
    app_log.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        app_log,
        format=log_settings.format,
        level=log_settings.level,
        filter=_application_record,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=diagnose,
        enqueue=True,
    )
    # One line per suggestion run
    logger.add(
        app_log.with_name("suggestions.audit.log"),
        format=AUDIT_FORMAT,
        filter=is_audit_record,
        rotation="1 week",
        retention="1 year",
        enqueue=True,
    )


def get_logger(name: str) -> Any:
    """Logger tagged with the calling module's name."""
    return logger.bind(name=name)


def is_audit_record(record: dict[str, Any]) -> bool:
    """True for records written by `audit_log`."""
    return record["extra"].get("audit_action") in {a.value for a in AuditAction}


def _application_record(record: dict[str, Any]) -> bool:
    return not is_audit_record(record)


def redact(data: Any) -> Any:
    """Replace credentials and talent attributes anywhere in a payload."""
    if isinstance(data, dict):
        return {
            key: REDACTED if _is_sensitive(key) else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [redact(item) for item in data]
    return data


def _is_sensitive(key: Any) -> bool:
    name = str(key).lower()
    return name in TALENT_ATTRIBUTE_KEYS or any(k in name for k in CREDENTIAL_KEYS)


def audit_log(action: AuditAction, talent_id: Any, details: dict[str, Any]) -> None:
    """
    Record one suggestion decision for a talent.

    Args:
        action: What was decided
        talent_id: The talent the run was for
        details: Decision payload (role ids, scores, reasons); redacted before writing
    """
    logger.bind(audit_action=AuditAction(action).value, talent_id=str(talent_id)).info(
        f"{redact(details)}"
    )


class LoggerMixin:
    """
    Gives a class a `logger` tagged with its class name.

        class RoleSuggestionService(LoggerMixin):
            async def suggest_roles(self, talent_id, ...):
                self.logger.info(f"Suggesting roles for {talent_id}")
    """

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(type(self).__name__)
        return self._logger
