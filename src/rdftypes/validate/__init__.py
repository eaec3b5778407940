"""rdf:type validation for file sets.

- RdfTypeRuleEngine: loads the rule file and evaluates observed types
- RdfTypeValidator: applies the engine to file set objects
"""

from rdftypes.validate.rules import (
    RdfTypeRuleEngine,
    Rule,
    RuleSet,
    ValidationVerdict,
)
from rdftypes.validate.validator import RdfTypeValidator, observed_types, raise_for_verdict

__all__ = [
    # Rules
    "RdfTypeRuleEngine",
    "Rule",
    "RuleSet",
    "ValidationVerdict",
    # Validator
    "RdfTypeValidator",
    "observed_types",
    "raise_for_verdict",
]
