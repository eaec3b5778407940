"""rdf:type rule engine.

This module loads the rdf:type rule file of a deployment and evaluates
the rdf:type values observed on a file set against it. A rule names one
rdf:type and says whether it is required and whether more than one file
in the set may carry it. Any rdf:type without a rule is not allowed.

Example rule file:
    - rdf_type: original_file
      required: true
    - rdf_type: thumbnail
      multiple: true
    - rdf_type: extracted_text
"""

import os
import threading
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator

import yaml

from rdftypes.core.config import RdfTypesSettings, get_settings
from rdftypes.core.exceptions import ConfigNotFound, ConfigParseError
from rdftypes.core.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME = "rdf_type_validation.yml"
BUNDLED_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / CONFIG_FILE_NAME

# Accepted spellings, first match wins
TAG_KEYS = ("rdf_type", "type_tag", "type")
MULTIPLE_KEYS = ("multiple", "allow_multiple")

# Priority order of finding categories
CATEGORIES = ("disallowed", "missing_required", "disallowed_duplicates")


@dataclass(frozen=True)
class Rule:
    """A single rdf:type rule.

    Attributes:
        type_tag: The rdf:type value this rule governs
        required: At least one file in the set must carry this type
        allow_multiple: More than one file in the set may carry this type
    """
    type_tag: str
    required: bool = False
    allow_multiple: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "rdf_type": self.type_tag,
            "required": self.required,
            "multiple": self.allow_multiple,
        }


class RuleSet:
    """Ordered, read-only collection of rules keyed by rdf:type."""

    def __init__(self, rules: Iterable[Rule] = (), source: str | None = None) -> None:
        self._rules: dict[str, Rule] = {}
        for idx, rule in enumerate(rules):
            if rule.type_tag in self._rules:
                raise ConfigParseError(
                    f"Duplicate rule for rdf:type '{rule.type_tag}'",
                    path=source,
                    record_index=idx,
                )
            self._rules[rule.type_tag] = rule

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._rules

    def __getitem__(self, type_tag: str) -> Rule:
        return self._rules[type_tag]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"RuleSet({list(self)!r})"

    def get(self, type_tag: str) -> Rule | None:
        return self._rules.get(type_tag)

    @property
    def tags(self) -> list[str]:
        """All allowed rdf:type values, in rule order."""
        return list(self._rules)

    @property
    def required_tags(self) -> list[str]:
        """rdf:type values that every file set must carry."""
        return [r.type_tag for r in self if r.required]

    @classmethod
    def from_yaml(cls, path: Path | str) -> "RuleSet":
        """Load rules from a YAML file.

        Args:
            path: Path to the rule file

        Returns:
            Parsed RuleSet

        Raises:
            ConfigNotFound: If the file does not exist
            ConfigParseError: If the file is not a valid rule document
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigNotFound(f"Rule file not found: {path}", path=str(path))

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Invalid YAML in rule file: {e}", path=str(path)) from e
        except UnicodeDecodeError as e:
            raise ConfigParseError(f"Rule file is not valid UTF-8: {e}", path=str(path)) from e
        except OSError as e:
            raise ConfigNotFound(f"Rule file cannot be read: {e}", path=str(path)) from e

        return cls.from_dict(data, source=str(path))

    @classmethod
    def from_dict(cls, data: Any, source: str | None = None) -> "RuleSet":
        """Create a rule set from parsed YAML data.

        Args:
            data: A list of rule records, or a mapping whose ``rules`` key
                holds that list. An empty document yields an empty rule set.
            source: Where the data came from, for error messages

        Returns:
            Parsed RuleSet
        """
        if data is None:
            return cls()
        if isinstance(data, dict):
            if "rules" not in data:
                raise ConfigParseError(
                    "Rule file mapping must have a 'rules' key holding a list of rules",
                    path=source,
                )
            data = data["rules"]
        if not isinstance(data, list):
            raise ConfigParseError(
                f"Rule file must contain a list of rules, got {type(data).__name__}",
                path=source,
            )

        rules = [_parse_record(record, idx, source) for idx, record in enumerate(data)]
        return cls(rules, source=source)

    def to_yaml(self) -> str:
        """Export rules to a YAML string."""
        return yaml.dump([r.to_dict() for r in self], default_flow_style=False, sort_keys=False)


def _parse_record(record: Any, idx: int, source: str | None) -> Rule:
    if not isinstance(record, dict):
        raise ConfigParseError(
            f"Rule #{idx} must be a mapping, got {type(record).__name__}",
            path=source,
            record_index=idx,
        )

    tag = next((record[k] for k in TAG_KEYS if k in record), None)
    if not isinstance(tag, str) or not tag.strip():
        raise ConfigParseError(
            f"Rule #{idx} is missing an rdf:type (one of {', '.join(TAG_KEYS)})",
            path=source,
            record_index=idx,
        )

    required = record.get("required", False)
    allow_multiple = next((record[k] for k in MULTIPLE_KEYS if k in record), False)
    for name, value in (("required", required), ("multiple", allow_multiple)):
        if not isinstance(value, bool):
            raise ConfigParseError(
                f"Rule '{tag}' has non-boolean '{name}': {value!r}",
                path=source,
                record_index=idx,
            )

    return Rule(type_tag=tag, required=required, allow_multiple=allow_multiple)


@dataclass(frozen=True)
class ValidationVerdict:
    """Result of evaluating observed rdf:types against a rule set.

    Attributes:
        disallowed: Observed types with no rule
        missing_required: Required types absent from the file set
        disallowed_duplicates: Types repeated although their rule forbids it
    """
    disallowed: tuple[str, ...] = ()
    missing_required: tuple[str, ...] = ()
    disallowed_duplicates: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not (self.disallowed or self.missing_required or self.disallowed_duplicates)

    def __bool__(self) -> bool:
        return self.is_valid

    def findings(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        """Yield non-empty (category, tags) pairs in priority order."""
        for category in CATEGORIES:
            tags = getattr(self, category)
            if tags:
                yield category, tags

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "disallowed": list(self.disallowed),
            "missing_required": list(self.missing_required),
            "disallowed_duplicates": list(self.disallowed_duplicates),
        }


class RdfTypeRuleEngine:
    """Loads rdf:type rules and evaluates file set types against them.

    The rule file is resolved once and cached on the engine. Resolution
    order when no explicit path is configured:

    1. ``settings.rules_path``
    2. ``<settings.app_root>/config/rdf_type_validation.yml``
    3. the rule file bundled with this package

    Example:
        >>> engine = RdfTypeRuleEngine()
        >>> verdict = engine.evaluate(["original_file", "thumbnail"])
        >>> verdict.is_valid
        True
    """

    def __init__(
        self,
        config_path: Path | str | None = None,
        settings: RdfTypesSettings | None = None,
        rules: RuleSet | None = None,
    ) -> None:
        """Initialize RdfTypeRuleEngine.

        Args:
            config_path: Explicit rule file; must exist
            settings: Settings used for default path resolution
            rules: Pre-built rules, bypassing file loading
        """
        self.settings = settings or get_settings()
        self._lock = threading.Lock()
        self._config_path: Path | None = None
        self._rules: RuleSet | None = None
        if config_path is not None:
            self.configure(config_path)
        self._rules = rules

    def configure(self, path: Path | str) -> None:
        """Point the engine at a rule file.

        The file is read lazily on the next ``load_rules()``. On failure
        the previous path and cached rules are kept.

        Raises:
            ConfigNotFound: If ``path`` is not an existing, readable file
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigNotFound(f"Rule file not found: {path}", path=str(path))
        if not os.access(path, os.R_OK):
            raise ConfigNotFound(f"Rule file is not readable: {path}", path=str(path))

        with self._lock:
            self._config_path = path
            self._rules = None
        logger.info(f"Configured rdf:type rule file: {path}")

    def reset(self) -> None:
        """Forget the configured path and any cached rules."""
        with self._lock:
            self._config_path = None
            self._rules = None

    def default_config_file_paths(self) -> list[Path]:
        """Candidate rule file locations, most specific first."""
        paths = []
        if self.settings.rules_path:
            paths.append(Path(self.settings.rules_path))
        paths.append(Path(self.settings.app_root) / "config" / CONFIG_FILE_NAME)
        paths.append(BUNDLED_CONFIG_PATH)
        return paths

    @property
    def config_file_path(self) -> Path:
        """The configured rule file, or the first existing default."""
        if self._config_path is not None:
            return self._config_path

        candidates = self.default_config_file_paths()
        for candidate in candidates:
            if candidate.is_file():
                return candidate

        raise ConfigNotFound(
            "No rdf:type rule file found",
            searched=[str(c) for c in candidates],
        )

    def load_rules(self) -> RuleSet:
        """Return the rule set, reading the rule file on first use."""
        rules = self._rules
        if rules is not None:
            return rules

        with self._lock:
            if self._rules is None:
                path = self.config_file_path
                self._rules = RuleSet.from_yaml(path)
                logger.info(f"Loaded {len(self._rules)} rdf:type rules from {path}")
            return self._rules

    @property
    def rules(self) -> RuleSet:
        return self.load_rules()

    def evaluate(self, observed_types: Iterable[str]) -> ValidationVerdict:
        """Evaluate observed rdf:types against the rules.

        Args:
            observed_types: One rdf:type per file in the file set

        Returns:
            ValidationVerdict listing each category's findings in first
            occurrence order (rule order for missing required types)
        """
        if isinstance(observed_types, str):
            raise TypeError("observed_types must be an iterable of rdf:type values, not a string")

        rules = self.load_rules()
        observed = list(observed_types)
        counts = Counter(observed)
        distinct = list(dict.fromkeys(observed))

        disallowed = tuple(t for t in distinct if t not in rules)
        missing_required = tuple(r.type_tag for r in rules if r.required and counts[r.type_tag] == 0)
        disallowed_duplicates = tuple(
            t for t in distinct
            if counts[t] > 1 and t in rules and not rules[t].allow_multiple
        )

        verdict = ValidationVerdict(
            disallowed=disallowed,
            missing_required=missing_required,
            disallowed_duplicates=disallowed_duplicates,
        )
        logger.debug(f"Evaluated {len(observed)} rdf:types: {verdict.to_dict()}")
        return verdict
