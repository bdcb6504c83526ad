"""Result record models for evaluation handler output.

Every handler in the evaluation chain reports its findings as
HandlerCheckResult records addressed by descriptor and credential
position, so consumers can correlate a record back to its source
without re-scanning the definition or the credential set.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

VALID_MESSAGE = "Input candidate valid for presentation submission"


class Status(str, Enum):
    """Severity of a result record."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


def descriptor_path(index: int) -> str:
    """Address of the input descriptor at *index* within the definition."""
    return f"$.input_descriptors[{index}]"


def credential_path(index: int) -> str:
    """Address of the credential at *index* within the credential set."""
    return f"$.verifiableCredential[{index}]"


class CheckPayload(BaseModel):
    """Outcome payload: the matched node (or ``[]``) and its validity."""

    model_config = {"frozen": True}

    result: Any
    valid: bool


class HandlerCheckResult(BaseModel):
    """Outcome of one handler check for one descriptor and one credential."""

    model_config = {"frozen": True}

    input_descriptor_path: str
    verifiable_credential_path: str
    evaluator: str
    status: Status
    message: str
    payload: CheckPayload

    @classmethod
    def info(
        cls,
        evaluator: str,
        input_descriptor_path: str,
        verifiable_credential_path: str,
        result: Any,
        message: str = VALID_MESSAGE,
    ) -> HandlerCheckResult:
        """Build a passing record."""
        return cls(
            input_descriptor_path=input_descriptor_path,
            verifiable_credential_path=verifiable_credential_path,
            evaluator=evaluator,
            status=Status.INFO,
            message=message,
            payload=CheckPayload(result=result, valid=True),
        )

    @classmethod
    def error(
        cls,
        evaluator: str,
        input_descriptor_path: str,
        verifiable_credential_path: str,
        result: Any,
        message: str,
    ) -> HandlerCheckResult:
        """Build a failing record carrying the reason in *message*."""
        return cls(
            input_descriptor_path=input_descriptor_path,
            verifiable_credential_path=verifiable_credential_path,
            evaluator=evaluator,
            status=Status.ERROR,
            message=message,
            payload=CheckPayload(result=result, valid=False),
        )

    @property
    def valid(self) -> bool:
        return self.payload.valid
