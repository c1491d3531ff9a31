"""Typed operation variants produced by `bfhl.core.classifier`.

Architectural role:
    Defines the closed set of request kinds accepted by `POST /bfhl`. The
    classifier converts the untyped JSON body into exactly one of these, and
    `bfhl.core.engine.execute` is the only consumer.

Determinism:
    The data classes are purely structural and immutable.
"""

from dataclasses import dataclass
from typing import Union


# Recognized body keys in the order used by the validation message.
OPERATION_KEYS = ("fibonacci", "prime", "lcm", "hcf", "AI")


@dataclass(frozen=True)
class FibonacciOperation:
    """Generate the first `count` Fibonacci terms (1 <= count <= 50)."""

    count: int


@dataclass(frozen=True)
class PrimeOperation:
    """Keep the prime elements of `values`, preserving order."""

    values: tuple[int, ...]


@dataclass(frozen=True)
class LcmOperation:
    values: tuple[int, ...]


@dataclass(frozen=True)
class HcfOperation:
    values: tuple[int, ...]


@dataclass(frozen=True)
class AIOperation:
    """Answer a natural-language question with a single word.

    Attributes:
        question: Trimmed, non-empty question text.
    """

    question: str


Operation = Union[FibonacciOperation, PrimeOperation, LcmOperation, HcfOperation, AIOperation]
