"""UrlTokenizer: default word segmentation for page URLs and titles."""

from __future__ import annotations

import re

from ..patterns import TOKEN_SPLITTER
from ..types import RuleTable


_SCHEME = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


class UrlTokenizer:
    """Split a page's URL and title into a set of lowercase word tokens.

    The URL scheme is dropped; host labels, path segments and query
    values are tokenized with the title. Stopwords, pure numbers and
    empty strings are discarded. Hyphenated words are kept whole and
    also contribute their parts.
    """

    def __init__(
        self,
        url_stopwords: set[str] | list[str],
        model: dict | None = None,
        region_code: str | None = None,
        rules: RuleTable | None = None,
    ) -> None:
        self.url_stopwords = {w.lower() for w in url_stopwords}
        self.model = model
        self.region_code = region_code
        self.rules = rules

    def tokenize(self, url: str, title: str) -> set[str]:
        tokens: set[str] = set()
        for text in (_SCHEME.sub("", url or ""), title or ""):
            for word in TOKEN_SPLITTER.split(text.lower()):
                self._add(tokens, word)
                if "-" in word:
                    for part in word.split("-"):
                        self._add(tokens, part)
        return tokens

    def _add(self, tokens: set[str], word: str) -> None:
        word = word.strip("-_")
        if not word or word.isdigit() or word in self.url_stopwords:
            return
        tokens.add(word)
