"""page-interests: classify visited pages into interests from rules and text."""

from .config import load_config
from .context import WorkerContext
from .coordinator import ClassificationCoordinator
from .types import (
    ClassificationOutcome,
    InterestResult,
    PageDescriptor,
    ResultType,
    UnknownMessageError,
)
from .worker import InterestsWorker, MessageKind

__version__ = "0.1.0"

__all__ = [
    "InterestsWorker",
    "MessageKind",
    "WorkerContext",
    "ClassificationCoordinator",
    "load_config",
    "ClassificationOutcome",
    "InterestResult",
    "PageDescriptor",
    "ResultType",
    "UnknownMessageError",
]
