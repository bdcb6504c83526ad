"""Definition validation pipeline combining parsing with Pydantic validation.

Two-stage validation: first parse the document with line tracking, then
validate against the PresentationDefinition model. Errors from both
stages are enriched with source positions and collected for batch
reporting. Credential sets are loaded through the same parser.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from pexeval.loader.yaml_parser import (
    DocumentParseError,
    LineMap,
    parse_document_file,
    parse_document_with_lines,
)
from pexeval.models.definition import (
    Constraints,
    CredentialSet,
    FieldConstraint,
    InputDescriptor,
    PresentationDefinition,
)

ENVELOPE_KEY = "presentation_definition"


def _field_names(model: type[BaseModel]) -> list[str]:
    return [info.alias or name for name, info in model.model_fields.items()]


# Valid keys per nesting level, used for typo suggestions
VALID_KEYS: dict[str, list[str]] = {
    "definition": _field_names(PresentationDefinition),
    "descriptor": _field_names(InputDescriptor),
    "constraints": _field_names(Constraints),
    "field": _field_names(FieldConstraint),
}


@dataclass
class ValidationErrorDetail:
    """A single validation error with source position and context.

    Attributes:
        field: The dotted path of the property that caused the error.
        message: Human-readable error description.
        type: Pydantic error type string (e.g. 'missing', 'extra_forbidden').
        line: 1-indexed line number in the source, or None if unknown.
        col: 1-indexed column number in the source, or None if unknown.
        suggestion: 'Did you mean X?' suggestion for typos, or None.
        input_value: The invalid input value, if available.
    """

    field: str
    message: str
    type: str
    line: int | None = None
    col: int | None = None
    suggestion: str | None = None
    input_value: Any = field(default=None)


def _loc_to_field_path(loc: tuple[str | int, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _find_line_for_field(
    field_path: str,
    line_map: LineMap,
) -> tuple[int | None, int | None]:
    """Look up the line for a field path, falling back to its parents."""
    parts = field_path.split(".")
    while parts:
        prefix = ".".join(parts)
        if prefix in line_map:
            return line_map[prefix]
        parts.pop()
    return None, None


def _level_for_loc(loc: tuple[str | int, ...]) -> str:
    """Name the model level an extra key at *loc* belongs to."""
    names = [part for part in loc[:-1] if isinstance(part, str)]
    if not names:
        return "definition"
    return {
        "input_descriptors": "descriptor",
        "constraints": "constraints",
        "fields": "field",
    }.get(names[-1], "definition")


def _get_suggestion(loc: tuple[str | int, ...]) -> str | None:
    """Get a 'did you mean?' suggestion for a mistyped property name."""
    if not loc:
        return None
    matches = difflib.get_close_matches(
        str(loc[-1]), VALID_KEYS[_level_for_loc(loc)], n=1, cutoff=0.6
    )
    if matches:
        return f"Did you mean '{matches[0]}'?"
    return None


def unwrap_definition(raw_data: dict[str, Any]) -> tuple[dict[str, Any], str]:
    """Strip a ``presentation_definition`` envelope if present.

    Returns:
        Tuple of (definition dict, line map prefix for its keys).
    """
    inner = raw_data.get(ENVELOPE_KEY)
    if isinstance(inner, dict) and len(raw_data) == 1:
        return inner, ENVELOPE_KEY + "."
    return raw_data, ""


def validate_definition(
    raw_data: dict[str, Any],
    line_map: LineMap,
) -> tuple[PresentationDefinition | None, list[ValidationErrorDetail]]:
    """Validate parsed document data against the PresentationDefinition model.

    Args:
        raw_data: Parsed document dictionary (optionally enveloped).
        line_map: Mapping of dotted key paths to (line, col) positions.

    Returns:
        Tuple of (PresentationDefinition, []) on success, or (None, errors).
    """
    data, prefix = unwrap_definition(raw_data)
    try:
        return PresentationDefinition.model_validate(data), []
    except ValidationError as e:
        errors: list[ValidationErrorDetail] = []
        for err in e.errors():
            loc = err.get("loc", ())
            field_path = _loc_to_field_path(loc)
            error_type = err.get("type", "unknown")
            line, col = _find_line_for_field(prefix + field_path, line_map)

            suggestion = None
            if error_type == "extra_forbidden":
                suggestion = _get_suggestion(loc)

            errors.append(
                ValidationErrorDetail(
                    field=field_path,
                    message=err.get("msg", "Validation error"),
                    type=error_type,
                    line=line,
                    col=col,
                    suggestion=suggestion,
                    input_value=err.get("input"),
                )
            )
        return None, errors


def _check_parsed(
    raw_data: Any,
    line_map: LineMap,
    empty_message: str,
) -> tuple[PresentationDefinition | None, list[ValidationErrorDetail]]:
    if raw_data is None:
        return None, [
            ValidationErrorDetail(field="<document>", message=empty_message, type="empty_file")
        ]
    if not isinstance(raw_data, dict):
        return None, [
            ValidationErrorDetail(
                field="<document>",
                message="A presentation definition must be an object",
                type="dict_type",
            )
        ]
    return validate_definition(raw_data, line_map)


def _parse_error_detail(e: DocumentParseError) -> ValidationErrorDetail:
    return ValidationErrorDetail(
        field="<document>",
        message=e.message,
        type="syntax_error",
        line=e.line,
        col=e.column,
    )


def validate_definition_file(
    filepath: Path,
) -> tuple[PresentationDefinition | None, list[ValidationErrorDetail]]:
    """Validate a presentation definition file (JSON or YAML).

    Returns:
        Tuple of (PresentationDefinition, []) on success, or (None, errors).
    """
    try:
        raw_data, line_map = parse_document_file(filepath)
    except DocumentParseError as e:
        return None, [_parse_error_detail(e)]
    return _check_parsed(raw_data, line_map, "File is empty or contains only comments")


def validate_definition_string(
    source: str,
    filename: str = "<string>",
) -> tuple[PresentationDefinition | None, list[ValidationErrorDetail]]:
    """Validate a presentation definition from a JSON or YAML string."""
    try:
        raw_data, line_map = parse_document_with_lines(source, filename=filename)
    except DocumentParseError as e:
        return None, [_parse_error_detail(e)]
    return _check_parsed(raw_data, line_map, "Input is empty or contains only comments")


def credential_set_from_data(data: Any) -> CredentialSet:
    """Build a CredentialSet from a presentation, a list, or one credential.

    Raises:
        ValidationError: If the credentials are not JSON-compatible.
    """
    if isinstance(data, list):
        return CredentialSet(verifiable_credential=data)
    if isinstance(data, dict) and "verifiableCredential" in data:
        return CredentialSet.model_validate(data)
    if data is None:
        return CredentialSet()
    return CredentialSet(verifiable_credential=[data])


def load_credential_set(filepath: Path) -> CredentialSet:
    """Load the credentials to evaluate from a JSON or YAML file.

    Raises:
        DocumentParseError: If the file contains syntax errors.
        FileNotFoundError: If the file does not exist.
    """
    data, _ = parse_document_file(filepath)
    return credential_set_from_data(data)
