"""Custom exceptions for rdftypes.

This module defines the exception hierarchy used throughout rdftypes
for clear error handling and reporting.
"""


class RdfTypesError(Exception):
    """Base exception for all rdftypes errors.

    All rdftypes-specific exceptions inherit from this class,
    allowing users to catch all rdftypes errors with a single except clause.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize RdfTypesError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(RdfTypesError):
    """Raised when configuration is invalid.

    This is raised when settings are misconfigured, required
    configuration is missing, or configuration files are malformed.
    """

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        setting_value: str | None = None,
    ) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Human-readable error message
            setting_name: Name of the problematic setting
            setting_value: Value that caused the error
        """
        details = {}
        if setting_name:
            details["setting_name"] = setting_name
        if setting_value:
            details["setting_value"] = setting_value
        super().__init__(message, details)
        self.setting_name = setting_name
        self.setting_value = setting_value


class ConfigNotFound(ConfigurationError):
    """Raised when no rule file exists at the configured or default paths."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        searched: list[str] | None = None,
    ) -> None:
        super().__init__(message, setting_name="rules_path", setting_value=path)
        if searched:
            self.details["searched"] = searched
        self.path = path
        self.searched = searched or []


class ConfigParseError(ConfigurationError):
    """Raised when a rule file exists but cannot be parsed into rules."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        record_index: int | None = None,
    ) -> None:
        super().__init__(message, setting_name="rules_path", setting_value=path)
        if record_index is not None:
            self.details["record_index"] = record_index
        self.path = path
        self.record_index = record_index


class RdfTypeValidationError(RdfTypesError):
    """Raised when a file set's rdf:type values violate the rules.

    Only one category is ever raised at a time. The offending tags of
    that category are available on ``tags``.
    """

    category = "invalid"

    def __init__(
        self,
        message: str | None = None,
        tags: list[str] | tuple[str, ...] | None = None,
        file_set_id: str | None = None,
    ) -> None:
        """Initialize RdfTypeValidationError.

        Args:
            message: Human-readable error message
            tags: rdf:type values that triggered this category
            file_set_id: ID of the file set that failed validation
        """
        details: dict = {}
        if tags:
            details["tags"] = list(tags)
        if file_set_id:
            details["file_set_id"] = file_set_id
        super().__init__(message or self.__doc__.strip().splitlines()[0], details)
        self.tags = list(tags or [])
        self.file_set_id = file_set_id


class DisallowedType(RdfTypeValidationError):
    """File set contains rdf:type values that are not allowed."""

    category = "disallowed"


class MissingRequiredType(RdfTypeValidationError):
    """File set is missing required rdf:type values."""

    category = "missing_required"


class DisallowedDuplicateType(RdfTypeValidationError):
    """File set repeats rdf:type values that may only appear once."""

    category = "disallowed_duplicates"
