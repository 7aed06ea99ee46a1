"""InterestClassifier ABC and PageTokens (per-request token memo)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..context import WorkerContext
from ..types import PageDescriptor, Tokenizer


class PageTokens:
    """Tokenizes a page at most once, on first use.

    Without a tokenizer every page has no tokens.
    """

    def __init__(self, page: PageDescriptor, tokenizer: Tokenizer | None) -> None:
        self.page = page
        self.tokenizer = tokenizer
        self._tokens: set[str] | None = None

    def get(self) -> set[str]:
        if self._tokens is None:
            if self.tokenizer is None:
                self._tokens = set()
            else:
                self._tokens = set(self.tokenizer.tokenize(self.page.url, self.page.title))
        return self._tokens


class InterestClassifier(ABC):
    """Base class for interest classifiers.

    Collaborators are read from the worker context at call time, so a
    bootstrap that swaps them takes effect on the next request.
    """

    def __init__(self, context: WorkerContext) -> None:
        self.context = context

    @abstractmethod
    def classify(self, page: PageDescriptor, tokens: PageTokens | None = None) -> list[str]:
        """Return interest tags for the page. May repeat tags. Empty = no opinion."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Classifier identifier ('rules' or 'keywords')."""

    def _tokens_for(self, page: PageDescriptor, tokens: PageTokens | None) -> PageTokens:
        return tokens if tokens is not None else PageTokens(page, self.tokenizer)

    @property
    def tokenizer(self) -> Tokenizer | None:
        return self.context.tokenizer
