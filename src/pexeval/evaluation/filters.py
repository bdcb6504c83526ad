"""JSON Schema filter validation for matched field values."""

from __future__ import annotations

from typing import Any, Literal

from jsonschema import FormatChecker
from jsonschema.exceptions import SchemaError
from jsonschema.validators import (
    Draft7Validator,
    Draft201909Validator,
    Draft202012Validator,
    validator_for,
)

from pexeval.evaluation.errors import FilterSchemaError

SchemaDraft = Literal["draft7", "draft2019-09", "draft2020-12"]

DRAFT_VALIDATORS = {
    "draft7": Draft7Validator,
    "draft2019-09": Draft201909Validator,
    "draft2020-12": Draft202012Validator,
}


def validate_filter(
    schema: dict[str, Any],
    value: Any,
    draft: SchemaDraft = "draft7",
    check_formats: bool = False,
) -> bool:
    """Check *value* against the filter *schema*.

    A ``$schema`` key in the filter selects its own draft; otherwise
    *draft* is used.

    Raises:
        FilterSchemaError: If the filter itself is not a valid schema.
    """
    validator_cls = validator_for(schema, default=DRAFT_VALIDATORS[draft])
    try:
        validator_cls.check_schema(schema)
    except SchemaError as exc:
        raise FilterSchemaError(schema, exc.message) from exc

    format_checker = FormatChecker() if check_formats else None
    validator = validator_cls(schema, format_checker=format_checker)
    return validator.is_valid(value)
