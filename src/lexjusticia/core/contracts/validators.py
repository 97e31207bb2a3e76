"""
JSON Schema Contract Validators

Validates engine outputs against the JSON Schema contracts shipped in
core/contracts/schema/ before they are handed to the settlement and display
layers. Uses the jsonschema library (Draft 2020-12).

Schemas:
- tier_boundaries.json
- provider_assessment.json
- crisis_spread.json
- capped_crisis_spread.json
- slash_result.json
- crisis_state.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema file loader.

    Schemas are package data next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Loaded schema cache
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load and meta-validate a schema.

        Args:
            schema_name: Schema name without extension (e.g. 'slash_result')

        Returns:
            Schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Validates dicts against one named schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Yields every ValidationError found in data."""
        return self.validator.iter_errors(data)


class TierBoundariesValidator(ContractValidator):
    def __init__(self):
        super().__init__("tier_boundaries")


class ProviderAssessmentValidator(ContractValidator):
    def __init__(self):
        super().__init__("provider_assessment")


class CrisisSpreadValidator(ContractValidator):
    def __init__(self):
        super().__init__("crisis_spread")


class CappedCrisisSpreadValidator(ContractValidator):
    def __init__(self):
        super().__init__("capped_crisis_spread")


class SlashResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("slash_result")


class CrisisStateValidator(ContractValidator):
    def __init__(self):
        super().__init__("crisis_state")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_tier_boundaries(data: Dict[str, Any]) -> None:
    TierBoundariesValidator().validate(data)


def validate_provider_assessment(data: Dict[str, Any]) -> None:
    ProviderAssessmentValidator().validate(data)


def validate_crisis_spread(data: Dict[str, Any]) -> None:
    CrisisSpreadValidator().validate(data)


def validate_capped_crisis_spread(data: Dict[str, Any]) -> None:
    CappedCrisisSpreadValidator().validate(data)


def validate_slash_result(data: Dict[str, Any]) -> None:
    SlashResultValidator().validate(data)


def validate_crisis_state(data: Dict[str, Any]) -> None:
    CrisisStateValidator().validate(data)
