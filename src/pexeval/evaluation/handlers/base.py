"""Base evaluation handler abstract class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pexeval.evaluation.client import EvaluationClient
    from pexeval.evaluation.results import ResultLog
    from pexeval.models.config import EvaluationConfig
    from pexeval.models.definition import CredentialSet, PresentationDefinition


class BaseEvaluationHandler(ABC):
    """Abstract base class for the handlers of an evaluation chain.

    Each handler inspects the definition and credential set and appends
    its findings to the client's result log. Handlers never return
    results and never mutate their inputs.
    """

    def __init__(self, client: EvaluationClient) -> None:
        self.client = client

    @property
    @abstractmethod
    def name(self) -> str:
        """Evaluator name stamped on every record this handler produces."""

    @property
    def results(self) -> ResultLog:
        return self.client.results

    @property
    def config(self) -> EvaluationConfig:
        return self.client.config

    @abstractmethod
    def handle(
        self, definition: PresentationDefinition, credentials: CredentialSet
    ) -> None:
        """Evaluate *credentials* against *definition*, appending records.

        Args:
            definition: The presentation definition being satisfied.
            credentials: The ordered credential set under evaluation.
        """
