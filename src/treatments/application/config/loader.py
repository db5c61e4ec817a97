"""Quote file loader with comprehensive error handling.

This module loads and parses JSON quote files. It handles file system
errors, JSON parsing errors and Pydantic validation errors with clear,
actionable error messages.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from treatments.application.config.schemas import QuoteConfiguration

logger = logging.getLogger(__name__)

# Discriminator tags pydantic inserts into pricing error locations
_PRICING_TAGS = frozenset({"linear", "fixed", "grid", "formula", "per_drop", "per_sqm"})


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the quote file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Discriminated-union tags (e.g. "grid" in ("pricing", "grid", "rows"))
    are dropped so paths match the file layout.

    Examples:
        >>> _format_json_path(("measurements", "drop"))
        'measurements.drop'
        >>> _format_json_path(("pricing", "grid", "rows", 0, "drop_min"))
        'pricing.rows[0].drop_min'
    """
    parts: list[str] = []
    for index, segment in enumerate(loc):
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        elif index == 1 and loc[0] == "pricing" and segment in _PRICING_TAGS:
            continue
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _reported_value(value: Any) -> Any:
    """Return the offending input in a JSON-serializable form.

    Python's json module reads Infinity and NaN literals as floats, which
    strict JSON encoders refuse to write back out.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error_type from a ValidationError."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": _reported_value(err.get("input")),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a multi-line message."""
    lines = ["Quote validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        # Nested objects are reported by path only
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def load_config(path: Path) -> QuoteConfiguration:
    """Load and validate a quote from a JSON file.

    Args:
        path: Path to the JSON quote file

    Returns:
        A validated QuoteConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "permission_denied": File cannot be read
            - "file_read_error": Other OS error while reading
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> try:
        ...     config = load_config(Path("living-room.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Quote file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading quote file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading quote file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in quote file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    logger.debug("Loaded quote file %s", path)
    try:
        return QuoteConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config_from_dict(data: dict[str, Any]) -> QuoteConfiguration:
    """Load and validate a quote from a dictionary.

    Used for quotes that arrive from API requests or are built in code.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return QuoteConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )
