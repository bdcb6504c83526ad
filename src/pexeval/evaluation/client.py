"""Evaluation client -- hosts the handler chain and its shared result log."""

from __future__ import annotations

import logging
from typing import Any

from pexeval.evaluation.handlers import get_handler
from pexeval.evaluation.results import ResultLog
from pexeval.models.config import EvaluationConfig
from pexeval.models.definition import CredentialSet, PresentationDefinition
from pexeval.models.result import HandlerCheckResult

logger = logging.getLogger(__name__)


class EvaluationClient:
    """Runs the configured handlers, in order, against one result log.

    Each call to evaluate() starts a fresh ResultLog, so evaluating the
    same inputs twice yields identical record sequences.

    Args:
        config: Handler chain and collaborator settings. Defaults to
            EvaluationConfig() (the FilterEvaluation handler only).
    """

    def __init__(self, config: EvaluationConfig | None = None) -> None:
        self.config = config or EvaluationConfig()
        self.results = ResultLog()

    def evaluate(
        self,
        definition: PresentationDefinition | dict[str, Any],
        credentials: CredentialSet | dict[str, Any],
    ) -> list[HandlerCheckResult]:
        """Evaluate a credential set against a presentation definition.

        Args:
            definition: Definition model or its raw dict form.
            credentials: Credential set model or a raw presentation dict
                with a ``verifiableCredential`` list.

        Returns:
            Every record appended by the chain, in append order.

        Raises:
            EvaluationConfigError: If a field path or filter is malformed.
            ValueError: If a configured handler name is unknown.
        """
        if not isinstance(definition, PresentationDefinition):
            definition = PresentationDefinition.model_validate(definition)
        if not isinstance(credentials, CredentialSet):
            credentials = CredentialSet.model_validate(credentials)

        self.results = ResultLog()
        handlers = [get_handler(name, self) for name in self.config.handlers]
        for handler in handlers:
            before = len(self.results)
            handler.handle(definition, credentials)
            logger.debug(
                "%s appended %d records for definition %s",
                handler.name,
                len(self.results) - before,
                definition.id,
            )
        return list(self.results)
