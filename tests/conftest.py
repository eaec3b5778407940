"""Pytest configuration and fixtures for rdftypes tests."""

import pytest

from rdftypes.core.config import RdfTypesSettings
from rdftypes.core.types import FileSet, StoredFile
from rdftypes.validate.rules import RdfTypeRuleEngine, Rule, RuleSet


SCENARIO_YAML = """
- rdf_type: image
  required: true
  multiple: false
- rdf_type: thumbnail
  required: false
  multiple: true
"""


@pytest.fixture
def settings(tmp_path) -> RdfTypesSettings:
    """Settings rooted in an empty temporary app directory."""
    app_root = tmp_path / "app"
    app_root.mkdir()
    return RdfTypesSettings(app_root=app_root)


@pytest.fixture
def scenario_rules() -> RuleSet:
    """image is required and single-use; thumbnail may repeat."""
    return RuleSet([
        Rule(type_tag="image", required=True, allow_multiple=False),
        Rule(type_tag="thumbnail", required=False, allow_multiple=True),
    ])


@pytest.fixture
def engine(scenario_rules, settings) -> RdfTypeRuleEngine:
    """Engine with the scenario rules injected."""
    return RdfTypeRuleEngine(rules=scenario_rules, settings=settings)


@pytest.fixture
def rule_file(tmp_path):
    """Write the scenario rules to a YAML file."""
    path = tmp_path / "rules.yml"
    path.write_text(SCENARIO_YAML)
    return path


@pytest.fixture
def valid_file_set() -> FileSet:
    return FileSet(
        id="fs-valid",
        title="Valid item",
        files=[
            StoredFile(type="image", filename="page.tif"),
            StoredFile(type="thumbnail", filename="page.jpg"),
            StoredFile(type="thumbnail", filename="page_small.jpg"),
        ],
    )


@pytest.fixture
def invalid_file_set() -> FileSet:
    """Carries an unknown type and lacks the required one."""
    return FileSet(
        id="fs-invalid",
        files=[
            StoredFile(type="thumbnail"),
            StoredFile(type="extracted_text"),
        ],
    )
