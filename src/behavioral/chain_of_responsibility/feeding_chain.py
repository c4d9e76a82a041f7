"""
Chain of Responsibility (Behavioral): feeding chain.

Intent:
    Pass a food along a chain of animals; each animal either eats the food it
    likes or hands it to the next animal in the chain.

Participants:
    - Handler (abstract): declares `set_next` and `handle`.
    - AbstractHandler: default chaining behavior (keeps the next link, forwards).
    - FoodHandler / MonkeyHandler / SquirrelHandler / DogHandler: eat one food,
      delegate everything else.
    - Client: builds the chain and offers foods to any handler in it.

Notes:
    - A handler does not need to be the head of the chain to receive requests.
    - "Nobody ate it" is a normal outcome reported as None, never an exception.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


# ------------------------------ Constants -------------------------------- #
FEEDING_TABLE: Mapping[str, str] = MappingProxyType({
    "banana": "Macaco",
    "noz": "Esquilo",
    "carne": "Cachorro",
})
"""Recognized food -> name of the animal that eats it."""

DEFAULT_FOODS = ("noz", "banana", "xícara de cafe")


# ------------------------------ Capability ------------------------------- #
class Handler(ABC):
    """
    Interface of a chain link: a way to attach the next link and a way to
    handle a request.
    """

    @abstractmethod
    def set_next(self, handler: Optional["Handler"]) -> Optional["Handler"]:
        """
        Attaches the next handler of the chain.

        :param handler: The next handler, or None to terminate the chain.
        :return: The given handler, so links can be chained fluently.
        """
        raise NotImplementedError(f"{type(self).__name__} did not implement 'set_next'")

    @abstractmethod
    def handle(self, request: str) -> Optional[str]:
        """
        Handles the request here or somewhere further down the chain.

        :param request: Food token offered to the chain.
        :return: Outcome string, or None when nobody in the chain handles it.
        """
        raise NotImplementedError(f"{type(self).__name__} did not implement 'handle'")


# ---------------------------- Chaining base ------------------------------ #
class AbstractHandler(Handler):
    """
    Default chaining behavior shared by every concrete handler.

    `handle` forwards unconditionally; subclasses override it and fall back
    to `_delegate` when the request is not theirs.

    :param next_handler: Optional next handler in the chain.
    """

    def __init__(self, next_handler: Optional[Handler] = None) -> None:
        self._next: Optional[Handler] = next_handler

    @property
    def next_handler(self) -> Optional[Handler]:
        """
        :return: The handler requests are forwarded to, or None if terminal.
        """
        return self._next

    def set_next(self, handler: Optional[Handler]) -> Optional[Handler]:
        """
        Replaces the next link and returns the new one.

        Returning the argument allows `monkey.set_next(squirrel).set_next(dog)`.

        :param handler: The next handler to delegate to.
        :return: The same handler.
        """
        self._next = handler
        return handler

    def handle(self, request: str) -> Optional[str]:
        return self._delegate(request)

    def _delegate(self, request: str) -> Optional[str]:
        """
        Forwards the request, unchanged, to the next handler if present.

        :param request: The incoming request.
        :return: Next handler's result, or None when this handler is terminal.
        """
        if self._next is not None:
            return self._next.handle(request)
        logger.debug("End of chain reached, %r was not handled", request)
        return None


# ---------------------------- Concrete handlers -------------------------- #
class FoodHandler(AbstractHandler):
    """
    Handler that eats exactly one food (case-sensitive, no normalization).

    :param food: The food this handler recognizes.
    :param eater: Display name used in the outcome string.
    :param next_handler: Optional next handler in the chain.
    """

    def __init__(self, food: str, eater: str, next_handler: Optional[Handler] = None) -> None:
        super().__init__(next_handler)
        self._food = food
        self._eater = eater

    @property
    def food(self) -> str:
        return self._food

    @property
    def eater(self) -> str:
        return self._eater

    def handle(self, request: str) -> Optional[str]:
        """
        Eats the food if it is ours; otherwise behaves exactly like the base.

        :param request: Food token.
        :return: "<eater>: Eu vou comer a <food>" or the delegated result.
        """
        if request == self._food:
            logger.debug("%s handled %r", self._eater, request)
            return f"{self._eater}: Eu vou comer a {request}"

        logger.debug("%s passes %r on", self._eater, request)
        return super().handle(request)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(food={self._food!r}, eater={self._eater!r})"


class MonkeyHandler(FoodHandler):
    """Eats bananas."""

    FOOD = "banana"

    def __init__(self, next_handler: Optional[Handler] = None) -> None:
        super().__init__(self.FOOD, FEEDING_TABLE[self.FOOD], next_handler)


class SquirrelHandler(FoodHandler):
    """Eats nuts."""

    FOOD = "noz"

    def __init__(self, next_handler: Optional[Handler] = None) -> None:
        super().__init__(self.FOOD, FEEDING_TABLE[self.FOOD], next_handler)


class DogHandler(FoodHandler):
    """Eats meat."""

    FOOD = "carne"

    def __init__(self, next_handler: Optional[Handler] = None) -> None:
        super().__init__(self.FOOD, FEEDING_TABLE[self.FOOD], next_handler)


# ------------------------------ Chain helpers ---------------------------- #
def iter_chain(entry: Optional[Handler]) -> Iterator[Handler]:
    """
    Walks the chain from `entry` to its terminal handler.

    :param entry: First handler to yield.
    :return: Iterator over the reachable handlers, in forwarding order.
    """
    node = entry
    while node is not None:
        yield node
        node = getattr(node, "next_handler", None)


def build_feeding_chain() -> AbstractHandler:
    """
    Builds the canonical chain (Monkey → Squirrel → Dog).

    :return: The head of the chain.
    """
    head = MonkeyHandler()
    head.set_next(SquirrelHandler()).set_next(DogHandler())
    return head


# ---------------------------------- Client -------------------------------- #
def describe_chain(entry: Handler, label: str) -> str:
    """
    Renders a banner such as "Cadeia: Macaco > Esquilo > Cachorro".

    :param entry: Entry point of the demonstrated chain.
    :param label: Banner prefix.
    """
    names = [getattr(h, "eater", type(h).__name__) for h in iter_chain(entry)]
    return f"{label}: {' > '.join(names)}"


def client_code(handler: Handler, foods: Sequence[str] = DEFAULT_FOODS) -> List[str]:
    """
    Offers every food to `handler` and reports what happened.

    The client only knows a single handler; it does not care whether that
    handler is part of a chain or where in it.

    :param handler: Entry point receiving the requests.
    :param foods: Foods to offer, in order.
    :return: Output lines, two per food (the question and the outcome).
    """
    lines: List[str] = []
    for food in foods:
        lines.append(f"Cliente: Quem quer uma {food}?")
        result = handler.handle(food)
        if result is not None:
            lines.append(f"  {result}")
        else:
            lines.append(f"  {food} está intacta.")
    return lines


def main() -> int:
    """Runs the demonstration on the full chain and on the sub-chain."""
    monkey = build_feeding_chain()
    squirrel = monkey.next_handler

    runs = (("Cadeia", monkey), ("Sub-cadeia", squirrel))
    for index, (label, entry) in enumerate(runs):
        if index:
            print()
        print(describe_chain(entry, label))
        for line in client_code(entry):
            print(line)
    return 0


__all__ = [
    "FEEDING_TABLE",
    "DEFAULT_FOODS",
    "Handler",
    "AbstractHandler",
    "FoodHandler",
    "MonkeyHandler",
    "SquirrelHandler",
    "DogHandler",
    "iter_chain",
    "build_feeding_chain",
    "describe_chain",
    "client_code",
    "main",
]


if __name__ == "__main__":
    raise SystemExit(main())
