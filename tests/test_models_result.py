"""Tests for pexeval.models.result - HandlerCheckResult and address helpers."""

import pytest
from pydantic import ValidationError

from pexeval.models.result import (
    VALID_MESSAGE,
    HandlerCheckResult,
    Status,
    credential_path,
    descriptor_path,
)


class TestAddresses:
    """Test fixed-format address strings."""

    def test_descriptor_path(self):
        assert descriptor_path(0) == "$.input_descriptors[0]"
        assert descriptor_path(12) == "$.input_descriptors[12]"

    def test_credential_path(self):
        assert credential_path(3) == "$.verifiableCredential[3]"


class TestHandlerCheckResult:
    """Test record builders and immutability."""

    def test_info_builder(self):
        record = HandlerCheckResult.info(
            "FilterEvaluation", descriptor_path(0), credential_path(1), result=[]
        )
        assert record.status == Status.INFO
        assert record.message == VALID_MESSAGE
        assert record.payload.valid is True
        assert record.payload.result == []
        assert record.valid is True

    def test_error_builder(self):
        node = {"value": 16, "path": "$.credentialSubject.age"}
        record = HandlerCheckResult.error(
            "FilterEvaluation", descriptor_path(0), credential_path(0), node, "nope"
        )
        assert record.status == Status.ERROR
        assert record.message == "nope"
        assert record.payload.valid is False
        assert record.payload.result == node

    def test_records_are_frozen(self):
        record = HandlerCheckResult.info("X", descriptor_path(0), credential_path(0), [])
        with pytest.raises(ValidationError):
            record.message = "changed"

    def test_json_shape(self):
        record = HandlerCheckResult.error(
            "FilterEvaluation", descriptor_path(0), credential_path(0), [], "missing"
        )
        assert record.model_dump(mode="json") == {
            "input_descriptor_path": "$.input_descriptors[0]",
            "verifiable_credential_path": "$.verifiableCredential[0]",
            "evaluator": "FilterEvaluation",
            "status": "error",
            "message": "missing",
            "payload": {"result": [], "valid": False},
        }
