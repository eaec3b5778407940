"""File Set Validation Example.

This example demonstrates how to check the rdf:type values of
file sets against a rule file.

## Key Features

1. **YAML-based Rules**: Declare allowed, required and single-use types
2. **Structured Verdicts**: Every violation category reported at once
3. **Strict Mode**: Raise on the first violated category
"""

from pathlib import Path
from tempfile import TemporaryDirectory

from rdftypes import (
    FileSet,
    RdfTypeRuleEngine,
    RdfTypeValidationError,
    RdfTypeValidator,
    StoredFile,
)

RULES = """
- rdf_type: original_file
  required: true
- rdf_type: thumbnail
  multiple: true
- rdf_type: extracted_text
"""


def main() -> None:
    with TemporaryDirectory() as tmp:
        rule_file = Path(tmp) / "rdf_type_validation.yml"
        rule_file.write_text(RULES)

        engine = RdfTypeRuleEngine(config_path=rule_file)
        validator = RdfTypeValidator(engine=engine)

        print("Rules:")
        for rule in engine.load_rules():
            print(f"  {rule.type_tag:<16} required={rule.required} multiple={rule.allow_multiple}")

        file_sets = [
            FileSet(
                title="Scanned letter",
                files=[
                    StoredFile(type="original_file", filename="letter.tif"),
                    StoredFile(type="thumbnail", filename="letter.jpg"),
                ],
            ),
            FileSet.from_types(["thumbnail", "extracted_text", "extracted_text", "audio"], title="Broken"),
        ]

        for file_set in file_sets:
            verdict = validator.check(file_set)
            print(f"\n{file_set.title}: {'valid' if verdict.is_valid else 'invalid'}")
            for category, tags in verdict.findings():
                print(f"  {category}: {', '.join(tags)}")

            try:
                validator.validate(file_set)
            except RdfTypeValidationError as e:
                print(f"  strict mode raised {type(e).__name__}: {e.tags}")


if __name__ == "__main__":
    main()
