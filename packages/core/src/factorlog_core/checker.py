"""Composite-product check: can n be written as a product of two integers > 1?"""

from __future__ import annotations

from dataclasses import dataclass

COMPOSITE = "composite"
PRIME = "prime"
INELIGIBLE = "ineligible"

_INELIGIBLE_EXPLANATION = "Must be an integer greater than 3 (smallest product is 2*2)."


@dataclass(frozen=True)
class CompositeResult:
    """Outcome of check_composite.

    ``reason`` is one of COMPOSITE, PRIME or INELIGIBLE. Ineligible inputs
    (non-integers, negatives, 0 to 3) share one reason; ``explanation`` is the
    text shown to users. ``factors`` is the smallest factor pair when
    ``result`` is True.
    """

    result: bool
    explanation: str
    reason: str
    factors: tuple[int, int] | None = None


def _as_int(n) -> int | None:
    if isinstance(n, bool):
        return None
    if isinstance(n, int):
        return n
    if isinstance(n, float) and n.is_integer():
        return int(n)
    return None


def check_composite(n) -> CompositeResult:
    """Return whether *n* is a product of two integers greater than 1.

    Scans divisors upward from 2 while ``i * i <= n`` and reports the first
    hit, so the factor pair is always (smallest divisor, cofactor).
    """
    value = _as_int(n)
    if value is None or value <= 3:
        return CompositeResult(result=False, explanation=_INELIGIBLE_EXPLANATION, reason=INELIGIBLE)

    i = 2
    while i * i <= value:
        if value % i == 0:
            other = value // i
            return CompositeResult(
                result=True,
                explanation=f"{value} = {i} × {other}",
                reason=COMPOSITE,
                factors=(i, other),
            )
        i += 1

    return CompositeResult(
        result=False,
        explanation=f"{value} is prime: it cannot be expressed as product of two integers > 1.",
        reason=PRIME,
    )
