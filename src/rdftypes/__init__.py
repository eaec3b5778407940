"""rdftypes - rdf:type rules for repository file sets.

A repository deployment declares which rdf:type values its file sets
may carry, which are required, and which may appear only once. rdftypes
loads those rules and checks file sets against them.

Example:
    >>> from rdftypes import FileSet, RdfTypeValidator
    >>>
    >>> validator = RdfTypeValidator()
    >>> verdict = validator.check(FileSet.from_types(["original_file", "thumbnail"]))
    >>> verdict.is_valid
    True
"""

from rdftypes._version import __version__
from rdftypes.core.config import RdfTypesSettings, configure, get_settings
from rdftypes.core.exceptions import (
    ConfigNotFound,
    ConfigParseError,
    ConfigurationError,
    DisallowedDuplicateType,
    DisallowedType,
    MissingRequiredType,
    RdfTypesError,
    RdfTypeValidationError,
)
from rdftypes.core.logging import get_logger, setup_logging
from rdftypes.core.types import FileSet, StoredFile

__all__ = [
    # Version
    "__version__",
    # Core types
    "FileSet",
    "StoredFile",
    # Config
    "RdfTypesSettings",
    "get_settings",
    "configure",
    # Exceptions
    "RdfTypesError",
    "ConfigurationError",
    "ConfigNotFound",
    "ConfigParseError",
    "RdfTypeValidationError",
    "DisallowedType",
    "MissingRequiredType",
    "DisallowedDuplicateType",
    # Logging
    "get_logger",
    "setup_logging",
    # Validation (lazy)
    "RdfTypeRuleEngine",
    "RdfTypeValidator",
    "Rule",
    "RuleSet",
    "ValidationVerdict",
    # Search (lazy)
    "HighlightsSearch",
    "empty_search_result",
    # Presenters (lazy)
    "PermissionBadge",
]


def __getattr__(name: str):
    """Lazy import for optional modules."""
    if name in ("RdfTypeRuleEngine", "Rule", "RuleSet", "ValidationVerdict"):
        from rdftypes.validate import rules
        return getattr(rules, name)

    if name == "RdfTypeValidator":
        from rdftypes.validate.validator import RdfTypeValidator
        return RdfTypeValidator

    if name in ("HighlightsSearch", "empty_search_result"):
        from rdftypes.search import highlights
        return getattr(highlights, name)

    if name == "PermissionBadge":
        from rdftypes.presenters.badge import PermissionBadge
        return PermissionBadge

    raise AttributeError(f"module 'rdftypes' has no attribute {name!r}")
