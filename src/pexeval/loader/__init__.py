"""pexeval document loader - parsing, validation, and error reporting."""

from pexeval.loader.validator import (
    ValidationErrorDetail,
    credential_set_from_data,
    load_credential_set,
    validate_definition_file,
    validate_definition_string,
)
from pexeval.loader.yaml_parser import (
    DocumentParseError,
    parse_document_file,
    parse_document_with_lines,
)

__all__ = [
    "DocumentParseError",
    "ValidationErrorDetail",
    "credential_set_from_data",
    "load_credential_set",
    "parse_document_file",
    "parse_document_with_lines",
    "validate_definition_file",
    "validate_definition_string",
]
