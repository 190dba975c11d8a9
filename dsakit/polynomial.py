"""Addition and display of polynomials held as descending term lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term ``coefficient * X^exponent``."""

    coefficient: int
    exponent: int

    def __str__(self) -> str:
        return f"{self.coefficient}X^{self.exponent}"


def add_polynomials(first: Sequence[Term], second: Sequence[Term]) -> list[Term]:
    """Merge two polynomials whose terms are in descending exponent order.

    Terms with equal exponents are combined; a zero sum is kept.
    """
    result: list[Term] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a.exponent == b.exponent:
            result.append(Term(a.coefficient + b.coefficient, a.exponent))
            i += 1
            j += 1
        elif a.exponent > b.exponent:
            result.append(a)
            i += 1
        else:
            result.append(b)
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def format_polynomial(terms: Sequence[Term]) -> str:
    """Render terms as ``cX^e``, joined by `` + `` before positive coefficients."""
    parts: list[str] = []
    for term, following in zip(terms, [*terms[1:], None]):
        parts.append(str(term))
        if following is not None and following.coefficient > 0:
            parts.append(" + ")
        else:
            parts.append(" ")
    return "".join(parts)