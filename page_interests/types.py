"""All dataclasses, Protocols, and type aliases for page-interests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Rule data
# ---------------------------------------------------------------------------

# condition key -> interest tags, or "__PATH" -> {path prefix: nested rule set}
HostRuleSet = dict[str, Any]
# host pattern (exact or containing "*") -> HostRuleSet
RuleTable = dict[str, HostRuleSet]


# ---------------------------------------------------------------------------
# Page & Results
# ---------------------------------------------------------------------------

@dataclass
class PageDescriptor:
    """A visited page, as sent with a classify request. Read-only."""
    host: str
    tld: str
    path: str | None = None
    title: str = ""
    url: str = ""
    language: str | None = None
    meta_data: dict | None = None

    @classmethod
    def from_message(cls, data: dict) -> PageDescriptor:
        """Build from a wire message. Missing host/tld raise KeyError."""
        return cls(
            host=data["host"],
            tld=data["tld"],
            path=data.get("path"),
            title=data.get("title") or "",
            url=data.get("url") or "",
            language=data.get("language"),
            meta_data=data.get("metaData"),
        )


class ResultType(str, Enum):
    RULES = "rules"
    KEYWORDS = "keywords"
    COMBINED = "combined"


@dataclass
class InterestResult:
    """Deduplicated interests from one signal source."""
    type: ResultType
    interests: set[str] = field(default_factory=set)

    def to_dict(self) -> dict:
        return {"type": self.type.value, "interests": sorted(self.interests)}


@dataclass
class ClassificationOutcome:
    """The three results of one classify request, in emission order."""
    results: list[InterestResult] = field(default_factory=list)

    def _get(self, result_type: ResultType) -> InterestResult:
        for result in self.results:
            if result.type == result_type:
                return result
        raise KeyError(result_type.value)

    @property
    def rules(self) -> InterestResult:
        return self._get(ResultType.RULES)

    @property
    def keywords(self) -> InterestResult:
        return self._get(ResultType.KEYWORDS)

    @property
    def combined(self) -> InterestResult:
        return self._get(ResultType.COMBINED)

    def to_list(self) -> list[dict]:
        return [r.to_dict() for r in self.results]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass
class WorkerConfig:
    """Process-wide settings supplied by a bootstrap message."""
    region_code: str | None = None
    namespace: str | None = None


@dataclass
class DataConfig:
    """Paths to the JSON payloads used to bootstrap from the CLI."""
    rules: str | None = None
    rules_type: str = "dfr"
    classifier_model: str | None = None
    url_stopwords: str | None = None


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class PageInterestsConfig:
    region_code: str | None = None
    namespace: str = "default"
    data: DataConfig = field(default_factory=DataConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, url: str, title: str) -> set[str]: ...


@runtime_checkable
class TextModel(Protocol):
    def classify(self, tokens: set[str]) -> str | None: ...


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class InterestsWorkerError(Exception):
    """Base error for the interests worker."""


class UnknownMessageError(InterestsWorkerError):
    """Raised when an inbound message names an operation the worker does not expose."""

    def __init__(self, message_name: object) -> None:
        self.message_name = message_name
        super().__init__(f"Unknown worker message: {message_name!r}")
