"""TextClassifier: tokenizer + statistical model behind one call."""

from __future__ import annotations

from ..types import PageDescriptor
from .base import InterestClassifier, PageTokens


class TextClassifier(InterestClassifier):
    """At most one interest, from the text model. Empty when unconfigured."""

    @property
    def name(self) -> str:
        return "keywords"

    def classify(self, page: PageDescriptor, tokens: PageTokens | None = None) -> list[str]:
        model = self.context.text_model
        if self.tokenizer is None or model is None:
            return []

        interest = model.classify(self._tokens_for(page, tokens).get())
        if interest is None:
            return []
        return [interest]
