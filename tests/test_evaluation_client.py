"""Tests for the evaluation client, handler registry, and result log."""

from __future__ import annotations

import pytest

from pexeval.evaluation.client import EvaluationClient
from pexeval.evaluation.handlers import HANDLER_REGISTRY, get_handler
from pexeval.evaluation.handlers.base import BaseEvaluationHandler
from pexeval.evaluation.handlers.filter_evaluation import (
    InputDescriptorFilterEvaluationHandler,
)
from pexeval.evaluation.results import ResultLog
from pexeval.models.config import EvaluationConfig
from pexeval.models.result import HandlerCheckResult

DEFINITION = {
    "id": "age-check",
    "input_descriptors": [
        {
            "id": "over-18",
            "constraints": {
                "fields": [
                    {
                        "path": ["$.credentialSubject.age"],
                        "filter": {"type": "number", "minimum": 18},
                    }
                ]
            },
        }
    ],
}

PRESENTATION = {
    "@context": ["https://www.w3.org/2018/credentials/v1"],
    "type": ["VerifiablePresentation"],
    "verifiableCredential": [
        {"credentialSubject": {"age": 16}},
        {"credentialSubject": {"age": 40}},
    ],
}


class TestEvaluationClient:
    """Test chain hosting and record collection."""

    def test_evaluate_accepts_raw_dicts(self) -> None:
        client = EvaluationClient()
        results = client.evaluate(DEFINITION, PRESENTATION)
        assert [r.payload.valid for r in results] == [False, True]

    def test_results_exposed_on_client(self) -> None:
        client = EvaluationClient()
        results = client.evaluate(DEFINITION, PRESENTATION)
        assert list(client.results) == results

    def test_each_evaluate_starts_fresh(self) -> None:
        client = EvaluationClient()
        first = client.evaluate(DEFINITION, PRESENTATION)
        second = client.evaluate(DEFINITION, PRESENTATION)
        assert len(client.results) == 2
        assert first == second

    def test_empty_handler_chain_yields_nothing(self) -> None:
        client = EvaluationClient(EvaluationConfig(handlers=[]))
        assert client.evaluate(DEFINITION, PRESENTATION) == []

    def test_unknown_handler_raises(self) -> None:
        client = EvaluationClient(EvaluationConfig(handlers=["NoSuchHandler"]))
        with pytest.raises(ValueError, match="NoSuchHandler"):
            client.evaluate(DEFINITION, PRESENTATION)

    def test_handlers_share_the_result_log(self) -> None:
        class MarkerHandler(BaseEvaluationHandler):
            @property
            def name(self) -> str:
                return "Marker"

            def handle(self, definition, credentials) -> None:
                self.results.append(
                    HandlerCheckResult.info(
                        self.name, "$.input_descriptors[0]", "$.verifiableCredential[0]", []
                    )
                )

        HANDLER_REGISTRY["Marker"] = MarkerHandler
        try:
            client = EvaluationClient(
                EvaluationConfig(handlers=["FilterEvaluation", "Marker"])
            )
            results = client.evaluate(DEFINITION, PRESENTATION)
        finally:
            del HANDLER_REGISTRY["Marker"]

        assert [r.evaluator for r in results] == [
            "FilterEvaluation",
            "FilterEvaluation",
            "Marker",
        ]


class TestGetHandler:
    """Test handler registry lookup."""

    def test_filter_evaluation_registered(self) -> None:
        handler = get_handler("FilterEvaluation", EvaluationClient())
        assert isinstance(handler, InputDescriptorFilterEvaluationHandler)
        assert handler.name == "FilterEvaluation"

    def test_unknown_name_lists_available(self) -> None:
        with pytest.raises(ValueError, match="Available handlers"):
            get_handler("Bogus", EvaluationClient())


class TestResultLog:
    """Test the append-only sink."""

    def test_append_and_iterate_in_order(self) -> None:
        log = ResultLog()
        a = HandlerCheckResult.info("X", "$.input_descriptors[0]", "$.verifiableCredential[0]", [])
        b = HandlerCheckResult.error(
            "X", "$.input_descriptors[0]", "$.verifiableCredential[1]", [], "bad"
        )
        log.append(a)
        log.append(b)
        assert list(log) == [a, b]
        assert len(log) == 2

    def test_snapshot_is_detached(self) -> None:
        log = ResultLog()
        snap = log.snapshot()
        log.append(
            HandlerCheckResult.info("X", "$.input_descriptors[0]", "$.verifiableCredential[0]", [])
        )
        assert snap == ()
        assert len(log.snapshot()) == 1
