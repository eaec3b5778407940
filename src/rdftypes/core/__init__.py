"""Core module for rdftypes - types, configuration, and utilities."""

from rdftypes.core.types import FileSet, StoredFile
from rdftypes.core.config import RdfTypesSettings
from rdftypes.core.exceptions import (
    RdfTypesError,
    ConfigurationError,
    ConfigNotFound,
    ConfigParseError,
    RdfTypeValidationError,
    DisallowedType,
    MissingRequiredType,
    DisallowedDuplicateType,
)

__all__ = [
    # Types
    "FileSet",
    "StoredFile",
    # Config
    "RdfTypesSettings",
    # Exceptions
    "RdfTypesError",
    "ConfigurationError",
    "ConfigNotFound",
    "ConfigParseError",
    "RdfTypeValidationError",
    "DisallowedType",
    "MissingRequiredType",
    "DisallowedDuplicateType",
]
