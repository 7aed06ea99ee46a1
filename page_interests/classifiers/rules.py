"""RuleClassifier: interests from the curated host/path/keyword rule table."""

from __future__ import annotations

import logging

from ..patterns import ANY_KEY, HOME_KEY, KEYWORD_SPLITTER, PATH_KEY
from ..types import HostRuleSet, PageDescriptor
from .base import InterestClassifier, PageTokens

logger = logging.getLogger(__name__)


def is_home_path(path: str | None) -> bool:
    """Site root, or a root-relative query string."""
    return not path or path == "/" or path.startswith("/?")


def keyword_matches(key: str, tokens: set[str]) -> bool:
    """Every whitespace/hyphen-separated part of key must be a token."""
    parts = [p for p in KEYWORD_SPLITTER.split(key) if p]
    return bool(parts) and all(p in tokens for p in parts)


class RuleClassifier(InterestClassifier):
    """Apply the matched host's and TLD's conditions to a page.

    ``__ANY`` tags are taken first. Remaining conditions (``__HOME`` and
    keyword phrases) are only evaluated when a side still has keys left,
    so pages on ``__ANY``-only hosts are never tokenized.
    """

    @property
    def name(self) -> str:
        return "rules"

    def classify(self, page: PageDescriptor, tokens: PageTokens | None = None) -> list[str]:
        if not self.context.store.installed:
            return []

        matcher = self.context.matcher
        matched_host = matcher.resolve(page.host, page.path)
        if page.host != page.tld:
            # TLD rules ignore the path: only __ANY entries survive narrowing.
            matched_tld = matcher.resolve(page.tld, None)
        else:
            matched_tld = None

        sides = [rules for rules in (matched_host, matched_tld) if rules]
        if not sides:
            return []

        interests: list[str] = []
        pending: list[HostRuleSet] = []
        for rules in sides:
            if isinstance(rules, list):
                # __PATH entry given as a bare tag list: unconditional tags
                interests.extend(rules)
                continue
            remaining = len(rules)
            if ANY_KEY in rules:
                interests.extend(rules[ANY_KEY])
                remaining -= 1
            if remaining:
                pending.append(rules)

        if pending:
            words = self._tokens_for(page, tokens).get()
            for rules in pending:
                interests.extend(self._match_conditions(rules, page.path, words))

        logger.debug("Rule interests for %s%s: %s", page.host, page.path or "", interests)
        return interests

    def _match_conditions(self, rules: HostRuleSet, path: str | None, words: set[str]) -> list[str]:
        matched: list[str] = []
        for key, tags in rules.items():
            if key in (ANY_KEY, PATH_KEY):
                continue
            if key == HOME_KEY:
                if is_home_path(path):
                    matched.extend(tags)
            elif keyword_matches(key, words):
                matched.extend(tags)
        return matched
