"""HostPathMatcher: resolve a (host, path) pair to the applicable rule set."""

from __future__ import annotations

import logging

from ..patterns import ANY_KEY, PATH_BOUNDARY_CHARS, PATH_KEY
from ..types import HostRuleSet
from .rule_store import RuleStore

logger = logging.getLogger(__name__)


def path_matches(prefix: str, path: str) -> bool:
    """True if path is prefix itself, or prefix followed by '#', '?' or '/'.

    '/path' matches '/path', '/path/', '/path?kw=' and '/path#hash',
    but not '/pathological'.
    """
    if path == prefix:
        return True
    if not path.startswith(prefix):
        return False
    return path[len(prefix)] in PATH_BOUNDARY_CHARS


def narrow(host_rules: HostRuleSet | None, path: str | None) -> HostRuleSet | None:
    """Apply path scoping to a host's rule set.

    A host with ``__ANY`` keeps its whole rule set regardless of path.
    Otherwise the first ``__PATH`` prefix (in dataset order) matching
    ``path`` selects the nested rule set.
    """
    if not host_rules:
        return None

    if ANY_KEY in host_rules:
        return host_rules

    if not path:
        return None

    for prefix, rules in (host_rules.get(PATH_KEY) or {}).items():
        if path_matches(prefix, path):
            return rules

    return None


class HostPathMatcher:
    """Exact host first, then the first matching wildcard pattern."""

    def __init__(self, store: RuleStore) -> None:
        self.store = store

    def resolve(self, host: str | None, path: str | None = None) -> HostRuleSet | None:
        if not self.store.installed or not host:
            return None

        result = narrow(self.store.lookup(host), path)
        if result:
            return result

        pattern = self.store.match_wildcard(host)
        if pattern is None:
            return None

        # Scanning stops at the first host match, even if narrowing fails.
        logger.debug("Host %s matched wildcard %s", host, pattern)
        return narrow(self.store.lookup(pattern), path)
