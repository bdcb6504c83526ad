"""Handler registry -- maps evaluator names to handler classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pexeval.evaluation.handlers.base import BaseEvaluationHandler
from pexeval.evaluation.handlers.filter_evaluation import (
    EVALUATOR_NAME,
    InputDescriptorFilterEvaluationHandler,
)

if TYPE_CHECKING:
    from pexeval.evaluation.client import EvaluationClient

HANDLER_REGISTRY: dict[str, type[BaseEvaluationHandler]] = {
    EVALUATOR_NAME: InputDescriptorFilterEvaluationHandler,
}


def get_handler(name: str, client: EvaluationClient) -> BaseEvaluationHandler:
    """Look up and instantiate the handler registered under *name*.

    Raises:
        ValueError: If *name* is not in the registry.
    """
    cls = HANDLER_REGISTRY.get(name)
    if cls is None:
        available = sorted(HANDLER_REGISTRY.keys())
        raise ValueError(
            f"Unknown evaluation handler {name!r}. "
            f"Available handlers: {available}"
        )
    return cls(client)
