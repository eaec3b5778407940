"""File set validator built on the rdf:type rule engine.

``check`` returns the full verdict. ``validate`` keeps the older
contract of raising one exception for the first violated category.
"""

from typing import Any

from rdftypes.core.config import RdfTypesSettings
from rdftypes.core.exceptions import (
    DisallowedDuplicateType,
    DisallowedType,
    MissingRequiredType,
    RdfTypeValidationError,
)
from rdftypes.core.logging import LogContext, get_logger
from rdftypes.validate.rules import RdfTypeRuleEngine, ValidationVerdict

logger = get_logger(__name__)

ERRORS: dict[str, type[RdfTypeValidationError]] = {
    "disallowed": DisallowedType,
    "missing_required": MissingRequiredType,
    "disallowed_duplicates": DisallowedDuplicateType,
}


def observed_types(file_set: Any) -> list[str]:
    """Return the declared rdf:type of each file attached to a file set.

    Works with any object exposing ``files`` whose items have a ``type``
    attribute. Files without a declared type are skipped.
    """
    return [f.type for f in file_set.files if getattr(f, "type", None) is not None]


def raise_for_verdict(verdict: ValidationVerdict, file_set_id: str | None = None) -> None:
    """Raise the exception for the first non-empty finding category.

    Raises:
        DisallowedType: If any observed type has no rule
        MissingRequiredType: If a required type is absent
        DisallowedDuplicateType: If a single-use type repeats
    """
    for category, tags in verdict.findings():
        raise ERRORS[category](tags=tags, file_set_id=file_set_id)


class RdfTypeValidator:
    """Validates the rdf:type values of a file set's files.

    Example:
        >>> validator = RdfTypeValidator()
        >>> verdict = validator.check(file_set)
        >>> if not verdict.is_valid:
        ...     print(verdict.to_dict())
    """

    def __init__(
        self,
        engine: RdfTypeRuleEngine | None = None,
        settings: RdfTypesSettings | None = None,
    ) -> None:
        self.engine = engine or RdfTypeRuleEngine(settings=settings)

    def check(self, file_set: Any) -> ValidationVerdict:
        """Evaluate a file set and return the verdict."""
        file_set_id = getattr(file_set, "id", None)
        types = observed_types(file_set)
        verdict = self.engine.evaluate(types)

        if not verdict.is_valid:
            with LogContext(logger, file_set_id=file_set_id, **verdict.to_dict()):
                logger.info(f"File set {file_set_id} failed rdf:type validation")
        return verdict

    def validate(self, file_set: Any) -> ValidationVerdict:
        """Evaluate a file set, raising on the first violated category.

        Categories are checked in the order disallowed, missing required,
        disallowed duplicate.

        Returns:
            The verdict, which is always valid when no exception is raised
        """
        verdict = self.check(file_set)
        raise_for_verdict(verdict, file_set_id=getattr(file_set, "id", None))
        return verdict
