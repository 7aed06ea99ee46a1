"""InterestsWorker: dispatch inbound messages, post replies.

Messages are handled one at a time, each to completion, in arrival
order. Replies go to the ``post`` callback. A request that fails
(classify, bootstrap or rule swap) is logged and produces no reply at
all; callers must apply their own timeout. Only an unknown operation
is fatal.
"""

from __future__ import annotations

import asyncio
import json
import logging
from enum import Enum
from typing import Callable

from .context import WorkerContext
from .coordinator import ClassificationCoordinator
from .types import UnknownMessageError

logger = logging.getLogger(__name__)


class MessageKind(str, Enum):
    BOOTSTRAP = "bootstrap"
    SWAP_RULES = "swapRules"
    CLASSIFY = "classify"

    @classmethod
    def parse(cls, name: object) -> MessageKind:
        if name == "getInterestsForDocument":
            return cls.CLASSIFY
        try:
            return cls(name)
        except ValueError:
            raise UnknownMessageError(name) from None


class InterestsWorker:
    """Owns one WorkerContext and routes messages to its handlers."""

    def __init__(
        self,
        context: WorkerContext | None = None,
        post: Callable[[dict], None] | None = None,
    ) -> None:
        self.context = context or WorkerContext()
        self.coordinator = ClassificationCoordinator(self.context)
        self.post = post
        self._handlers: dict[MessageKind, Callable[[dict], dict | None]] = {
            MessageKind.BOOTSTRAP: self.bootstrap,
            MessageKind.SWAP_RULES: self.swap_rules,
            MessageKind.CLASSIFY: self.classify,
        }

    def handle(self, message: dict) -> dict | None:
        """Dispatch one message. Raises UnknownMessageError for unexposed operations."""
        kind = MessageKind.parse(message.get("message"))
        reply = self._handlers[kind](message)
        if reply is not None and self.post is not None:
            self.post(reply)
        return reply

    def bootstrap(self, message: dict) -> dict | None:
        try:
            self.context.bootstrap(message)
        except Exception as e:
            logger.error("Bootstrap failed, previous state kept: %s", e, exc_info=True)
            return None
        return {"message": "bootstrapComplete"}

    def swap_rules(self, message: dict) -> dict | None:
        try:
            self.context.replace_rules(message)
        except Exception as e:
            logger.error("Rule swap failed, previous rules kept: %s", e, exc_info=True)
            return None
        return {"message": "swapRulesComplete"}

    def classify(self, message: dict) -> dict | None:
        return self.coordinator.respond(message)


async def serve(worker: InterestsWorker, reader: asyncio.StreamReader) -> int:
    """Feed JSON-lines messages from reader to the worker until EOF.

    Lines that are not JSON objects are logged and skipped. An unknown
    operation ends the loop with UnknownMessageError. Returns the number
    of messages handled.
    """
    handled = 0
    while True:
        line = await reader.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        try:
            message = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning("Skipping undecodable message: %s", e)
            continue
        if not isinstance(message, dict):
            logger.warning("Skipping non-object message: %r", message)
            continue

        worker.handle(message)
        handled += 1
    logger.info("Message channel closed after %d messages", handled)
    return handled
