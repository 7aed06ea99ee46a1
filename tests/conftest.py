"""Shared fixtures for page-interests tests."""

from __future__ import annotations

import re

import pytest

from page_interests.context import WorkerContext
from page_interests.core.rule_store import RuleStore
from page_interests.types import PageDescriptor
from page_interests.worker import InterestsWorker


class FakeTokenizer:
    """Lowercased word split of url + title; records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def tokenize(self, url: str, title: str) -> set[str]:
        self.calls.append((url, title))
        return {w for w in re.split(r"[^a-z0-9]+", f"{url} {title}".lower()) if w}


class FakeTextModel:
    """Returns the label of the first known token (sorted), else None."""

    def __init__(self, labels: dict[str, str] | None = None) -> None:
        self.labels = labels or {}
        self.calls: list[set[str]] = []

    def classify(self, tokens: set[str]) -> str | None:
        self.calls.append(set(tokens))
        for token in sorted(tokens):
            if token in self.labels:
                return self.labels[token]
        return None


@pytest.fixture
def rule_table() -> dict:
    return {
        "example.com": {"__ANY": ["shopping"]},
        "news.org": {
            "__PATH": {
                "/sports": {"__ANY": ["sports"]},
                "/tech": {"gadget review": ["technology"], "__ANY": ["news"]},
            },
        },
        "recipes.net": {
            "__ANY": ["cooking"],
            "__HOME": ["food"],
            "vegan": ["vegetarian"],
        },
        "*.blogspot.com": {"__ANY": ["blogging"]},
        "*.example.com": {"__ANY": ["wildcard-shopping"]},
        "*.travel.com": {"__PATH": {"/flights": {"__ANY": ["travel"]}}},
        "forum.com": {
            "__HOME": ["community"],
            "car-repair": ["autos"],
            "stock market": ["finance"],
        },
        "shop.forum.com": {"__ANY": ["shopping"]},
    }


@pytest.fixture
def store(rule_table) -> RuleStore:
    s = RuleStore()
    s.replace(rule_table, "dfr")
    return s


@pytest.fixture
def tokenizer() -> FakeTokenizer:
    return FakeTokenizer()


@pytest.fixture
def text_model() -> FakeTextModel:
    return FakeTextModel({"football": "sports", "recipe": "cooking", "laptop": "technology"})


@pytest.fixture
def context(store, tokenizer, text_model) -> WorkerContext:
    return WorkerContext(store=store, tokenizer=tokenizer, text_model=text_model)


@pytest.fixture
def worker(context) -> InterestsWorker:
    return InterestsWorker(context=context)


@pytest.fixture
def make_page():
    def _make(host: str, path: str | None = "/", tld: str | None = None, url: str = "", title: str = "") -> PageDescriptor:
        return PageDescriptor(host=host, tld=tld or host, path=path, url=url, title=title)
    return _make


@pytest.fixture
def nb_model() -> dict:
    return {
        "classes": ["sports", "cooking"],
        "priors": [-0.69, -0.69],
        "likelihoods": {
            "football": [-1.0, -6.0],
            "goal": [-2.0, -5.0],
            "recipe": [-6.0, -1.0],
            "oven": [-5.0, -1.5],
        },
    }
