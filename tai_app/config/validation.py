"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_help_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate documentation lookup parameters."""
        errors = []

        if "base_url" in params:
            value = params["base_url"]
            parsed = urlparse(value) if isinstance(value, str) else None
            if parsed is None or not parsed.scheme or not parsed.netloc:
                errors.append(ValidationError(
                    field="base_url",
                    message="Must be an absolute URL with scheme and host",
                    value=value
                ))
            elif value.endswith("/"):
                errors.append(ValidationError(
                    field="base_url",
                    message="Must not end with a slash",
                    value=value
                ))

        if "fetch_timeout_seconds" in params:
            value = params["fetch_timeout_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="fetch_timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        if "data_file" in params:
            value = params["data_file"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="data_file",
                    message="Must be a path string (empty for the bundled table)",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "help" in config:
            errors.extend(ConfigValidator.validate_help_params(config["help"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
