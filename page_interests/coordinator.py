"""ClassificationCoordinator: rule + text classification, merged per page."""

from __future__ import annotations

import logging
from typing import Iterable

from .classifiers.base import PageTokens
from .classifiers.rules import RuleClassifier
from .classifiers.text import TextClassifier
from .context import WorkerContext
from .types import ClassificationOutcome, InterestResult, PageDescriptor, ResultType

logger = logging.getLogger(__name__)

RESPONSE_MESSAGE = "InterestsForDocument"


def dedupe(interests: Iterable[str]) -> set[str]:
    return set(interests)


class ClassificationCoordinator:
    """Produces the rules, keywords and combined results for a page.

    Rule interests take priority: ``combined`` is the rule result when
    rules matched anything, and the text result otherwise.
    """

    def __init__(self, context: WorkerContext) -> None:
        self.context = context
        self.rule_classifier = RuleClassifier(context)
        self.text_classifier = TextClassifier(context)

    def classify(self, page: PageDescriptor) -> ClassificationOutcome:
        tokens = PageTokens(page, self.context.tokenizer)
        outcome = ClassificationOutcome()

        rule_interests = dedupe(self.rule_classifier.classify(page, tokens))
        outcome.results.append(InterestResult(ResultType.RULES, rule_interests))
        if rule_interests:
            outcome.results.append(InterestResult(ResultType.COMBINED, set(rule_interests)))

        text_interests = dedupe(self.text_classifier.classify(page, tokens))
        outcome.results.append(InterestResult(ResultType.KEYWORDS, text_interests))
        if not rule_interests:
            outcome.results.append(InterestResult(ResultType.COMBINED, set(text_interests)))

        return outcome

    def respond(self, message: dict) -> dict | None:
        """Classify a request message and build the reply.

        The reply echoes the request with ``message``, ``namespace`` and
        ``results`` set. Any failure is logged and yields None: the
        request gets no reply.
        """
        try:
            page = PageDescriptor.from_message(message)
            outcome = self.classify(page)
            results = outcome.to_list()
        except Exception as e:
            logger.error("Failed to classify document: %s", e, exc_info=True)
            return None

        reply = dict(message)
        reply["message"] = RESPONSE_MESSAGE
        reply["namespace"] = self.context.namespace
        reply["results"] = results
        return reply
