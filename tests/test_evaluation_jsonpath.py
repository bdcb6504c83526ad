"""Tests for JSONPath field extraction."""

from __future__ import annotations

import pytest

from pexeval.evaluation.errors import PathSyntaxError
from pexeval.evaluation.jsonpath import compile_path, extract_input_field

CREDENTIAL = {
    "type": ["VerifiableCredential", "UniversityDegreeCredential"],
    "credentialSubject": {
        "id": "did:example:123",
        "age": 21,
        "degree": {"type": "BachelorDegree", "name": "Bachelor of Science"},
    },
}


class TestExtractInputField:
    """Test first-matching-path extraction."""

    def test_single_match(self) -> None:
        nodes = extract_input_field(CREDENTIAL, ["$.credentialSubject.age"])
        assert len(nodes) == 1
        assert nodes[0]["value"] == 21
        assert nodes[0]["path"] == "$.credentialSubject.age"

    def test_no_match_returns_empty_list(self) -> None:
        assert extract_input_field(CREDENTIAL, ["$.credentialSubject.height"]) == []

    def test_first_matching_path_wins(self) -> None:
        nodes = extract_input_field(
            CREDENTIAL,
            ["$.credentialSubject.missing", "$.credentialSubject.degree.type", "$.type"],
        )
        assert [n["value"] for n in nodes] == ["BachelorDegree"]

    def test_wildcard_returns_all_matches_in_order(self) -> None:
        nodes = extract_input_field(CREDENTIAL, ["$.type[*]"])
        assert [n["value"] for n in nodes] == [
            "VerifiableCredential",
            "UniversityDegreeCredential",
        ]

    def test_values_are_copies(self) -> None:
        nodes = extract_input_field(CREDENTIAL, ["$.credentialSubject.degree"])
        nodes[0]["value"]["name"] = "changed"
        assert CREDENTIAL["credentialSubject"]["degree"]["name"] == "Bachelor of Science"

    def test_path_into_scalar_does_not_raise(self) -> None:
        assert extract_input_field(CREDENTIAL, ["$.credentialSubject.age.value"]) == []

    def test_non_object_document(self) -> None:
        assert extract_input_field("header.payload.signature", ["$.credentialSubject"]) == []

    def test_standard_dialect(self) -> None:
        nodes = extract_input_field(
            CREDENTIAL, ["$.credentialSubject.id"], dialect="standard"
        )
        assert nodes[0]["value"] == "did:example:123"

    def test_malformed_path_raises(self) -> None:
        with pytest.raises(PathSyntaxError) as exc_info:
            extract_input_field(CREDENTIAL, ["$.credentialSubject["])
        assert exc_info.value.path == "$.credentialSubject["

    def test_malformed_later_path_not_parsed_after_match(self) -> None:
        nodes = extract_input_field(CREDENTIAL, ["$.credentialSubject.age", "$.["])
        assert nodes[0]["value"] == 21

    def test_wildcard_paths_use_bracket_indices(self) -> None:
        nodes = extract_input_field(CREDENTIAL, ["$.type[*]"])
        assert [n["path"] for n in nodes] == ["$.type[0]", "$.type[1]"]

    def test_quoted_names_use_bracket_notation(self) -> None:
        document = {"credentialSubject": {"given name": "Ada"}}
        nodes = extract_input_field(document, ["$.credentialSubject.'given name'"])
        assert nodes[0]["value"] == "Ada"
        assert nodes[0]["path"] == "$.credentialSubject['given name']"


class TestFilterExpressions:
    """Test extended-dialect filter expressions."""

    ITEMS = {"credentialSubject": {"items": [{"n": 2}, {"n": 9}]}}

    def test_filter_selects_matching_items(self) -> None:
        nodes = extract_input_field(self.ITEMS, ["$.credentialSubject.items[?(@.n > 5)]"])
        assert [n["value"] for n in nodes] == [{"n": 9}]
        assert nodes[0]["path"] == "$.credentialSubject.items[1]"

    def test_comparison_with_null_is_no_match(self) -> None:
        document = {"credentialSubject": {"items": [{"n": None}]}}
        assert extract_input_field(document, ["$.credentialSubject.items[?(@.n > 5)]"]) == []

    def test_comparison_across_types_is_no_match(self) -> None:
        document = {"credentialSubject": {"items": [{"n": 3}]}}
        assert extract_input_field(document, ["$.credentialSubject.items[?(@.n > 'a')]"]) == []

    def test_unevaluable_path_falls_through_to_next(self) -> None:
        document = {"credentialSubject": {"items": [{"n": None}], "age": 40}}
        nodes = extract_input_field(
            document,
            ["$.credentialSubject.items[?(@.n > 5)]", "$.credentialSubject.age"],
        )
        assert nodes[0]["value"] == 40


class TestCompilePath:
    """Test compiled expression caching."""

    def test_same_expression_is_cached(self) -> None:
        assert compile_path("$.a.b") is compile_path("$.a.b")

    def test_dialects_cached_separately(self) -> None:
        assert compile_path("$.a", "extended") is not compile_path("$.a", "standard")
