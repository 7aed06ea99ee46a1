"""Condition keys, dataset markers and regexes shared by the rule and text paths.

Kept in a standalone module to avoid circular imports between the core
and the classifiers.
"""

import re

ANY_KEY = "__ANY"
PATH_KEY = "__PATH"
HOME_KEY = "__HOME"

# Declared type of the only rule-table payload the worker installs.
RULES_DATA_TYPE = "dfr"

# Characters allowed right after a matched path prefix.
PATH_BOUNDARY_CHARS = "#?/"

# Multi-word rule keys: "foo bar", "foo-bar", "foo - bar".
KEYWORD_SPLITTER = re.compile(r"[\s-]+")

# Anything that is not a word character, a hyphen, or a Latin-1/Latin
# Extended-A, Greek or Cyrillic letter separates tokens.
TOKEN_SPLITTER = re.compile(r"[^-\w\u00c0-\u017f\u0380-\u03ff\u0400-\u04ff]+")
