"""WorkerContext: process-wide rule data, settings and collaborators."""

from __future__ import annotations

import logging

from .core.matcher import HostPathMatcher
from .core.naive_bayes import NaiveBayesClassifier
from .core.rule_store import RuleStore
from .core.tokenizer import UrlTokenizer
from .types import TextModel, Tokenizer, WorkerConfig

logger = logging.getLogger(__name__)


class WorkerContext:
    """Everything a bootstrap installs, owned in one place.

    One context per worker. Nothing here is shared between workers; a
    bootstrap builds the new collaborators first and then rebinds the
    attributes, so a reader sees either the old or the new set.
    """

    def __init__(
        self,
        store: RuleStore | None = None,
        tokenizer: Tokenizer | None = None,
        text_model: TextModel | None = None,
        config: WorkerConfig | None = None,
    ) -> None:
        self.store = store or RuleStore()
        self.matcher = HostPathMatcher(self.store)
        self.tokenizer = tokenizer
        self.text_model = text_model
        self.config = config or WorkerConfig()

    @property
    def namespace(self) -> str | None:
        return self.config.namespace

    def bootstrap(self, message: dict) -> None:
        """Install settings, rule data and collaborators from a bootstrap message.

        Expects ``workerRegionCode``, ``workerNamespace``, ``interestsData``,
        ``interestsDataType`` and optionally ``interestsClassifierModel`` and
        ``interestsUrlStopwords``. A tokenizer is only built when stopwords
        are supplied, a text model only when a model is supplied; otherwise
        the previous ones stay in place.
        """
        stopwords = message.get("interestsUrlStopwords")
        model = message.get("interestsClassifierModel")
        config = WorkerConfig(
            region_code=message.get("workerRegionCode"),
            namespace=message.get("workerNamespace"),
        )

        # Build against the incoming table first; the store swap and rebind come last.
        rules = self.store.table
        data = message.get("interestsData")
        if data is not None and self.store.accepts(message.get("interestsDataType")):
            rules = data

        text_model = self.text_model
        if model:
            text_model = NaiveBayesClassifier(model)

        tokenizer = self.tokenizer
        if stopwords:
            tokenizer = UrlTokenizer(
                url_stopwords=stopwords,
                model=model,
                region_code=config.region_code,
                rules=rules,
            )

        self.replace_rules(message)
        self.config, self.tokenizer, self.text_model = config, tokenizer, text_model
        logger.info(
            "Bootstrapped worker: namespace=%s region=%s tokenizer=%s text_model=%s",
            config.namespace, config.region_code,
            tokenizer is not None, text_model is not None,
        )

    def replace_rules(self, message: dict) -> bool:
        """Swap in ``interestsData`` if ``interestsDataType`` is recognized."""
        data = message.get("interestsData")
        if data is None:
            return False
        return self.store.replace(data, message.get("interestsDataType"))
