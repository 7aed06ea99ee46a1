"""RuleStore: the installed rule table plus its wildcard-domain index."""

from __future__ import annotations

import logging
import re

from ..patterns import RULES_DATA_TYPE
from ..types import HostRuleSet, RuleTable

logger = logging.getLogger(__name__)


def compile_wildcard(pattern: str) -> re.Pattern:
    """Compile a wildcard host pattern: "." is literal, "*" is one or more chars."""
    expr = ".+".join(re.escape(part) for part in pattern.split("*"))
    return re.compile(f"^{expr}$", re.IGNORECASE)


class RuleStore:
    """Holds the current rule table. Replaced wholesale, never mutated in place.

    The wildcard index lists the table's keys containing ``*`` in table
    order, each with its compiled expression. Both are rebuilt on every
    replacement and published together with the table.
    """

    def __init__(self) -> None:
        self._table: RuleTable | None = None
        self._wildcards: list[tuple[str, re.Pattern]] = []

    @property
    def installed(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> RuleTable | None:
        return self._table

    @property
    def wildcard_index(self) -> list[str]:
        return [pattern for pattern, _ in self._wildcards]

    def accepts(self, data_type: str | None) -> bool:
        return data_type == RULES_DATA_TYPE

    def replace(self, table: RuleTable, data_type: str | None = RULES_DATA_TYPE) -> bool:
        """Install a new rule table. Returns False (no-op) for unrecognized data types."""
        if not self.accepts(data_type):
            logger.warning("Ignoring rule data of unrecognized type %r", data_type)
            return False

        if not isinstance(table, dict):
            raise TypeError(f"Rule table must be a mapping, got {type(table).__name__}")

        wildcards = [
            (pattern, compile_wildcard(pattern))
            for pattern in table
            if "*" in pattern
        ]
        # Swap both references last so readers never see a half-built index.
        self._table, self._wildcards = table, wildcards
        logger.info(
            "Installed rule table: %d hosts, %d wildcard patterns",
            len(table), len(wildcards),
        )
        return True

    def lookup(self, host_pattern: str | None) -> HostRuleSet | None:
        if self._table is None or host_pattern is None:
            return None
        return self._table.get(host_pattern)

    def match_wildcard(self, host: str) -> str | None:
        """First wildcard pattern (in table order) whose expression matches host."""
        for pattern, regex in self._wildcards:
            if regex.fullmatch(host):
                return pattern
        return None
