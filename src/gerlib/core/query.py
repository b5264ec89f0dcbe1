"""Change-query options and their URL encoding.

A search query is either a raw string (``"status:open owner:self"``)
or a :class:`SearchQuery` composed from operators, which renders to the
same space-separated form::

    SearchQuery(IsOperator(Is.OPEN), BoolOperator.AND, OwnerOperator("self"))
    # -> "is:open AND owner:self"

:class:`QueryParams` maps onto the server's parameter names: ``q``
(repeatable search queries), ``o`` (repeatable additional options),
``n`` (limit) and ``S`` (start offset).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

import httpx

from gerlib.core.models.enums import AdditionalOpt, BoolOperator, GroupOperator, Is
from gerlib.exceptions import WrongQuery


# ---------------------------------------------------------------------------
# Search operators
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IsOperator:
    state: Is

    def __str__(self) -> str:
        return f"is:{Is(self.state).value}"


@dataclass(frozen=True, slots=True)
class OwnerOperator:
    account: str

    def __str__(self) -> str:
        return f"owner:{self.account}"


@dataclass(frozen=True, slots=True)
class ReviewerOperator:
    account: str

    def __str__(self) -> str:
        return f"reviewer:{self.account}"


@dataclass(frozen=True, slots=True)
class LimitOperator:
    count: int

    def __str__(self) -> str:
        return f"limit:{self.count}"


QueryOperator = Union[
    IsOperator, OwnerOperator, ReviewerOperator, LimitOperator, BoolOperator, GroupOperator,
]


def _render_operator(operator: QueryOperator) -> str:
    if isinstance(operator, (BoolOperator, GroupOperator)):
        return operator.value
    if isinstance(operator, (OwnerOperator, ReviewerOperator, LimitOperator)):
        return str(operator)
    if isinstance(operator, IsOperator):
        try:
            return str(operator)
        except ValueError as exc:
            raise WrongQuery(f"Unknown is: state {operator.state!r}") from exc
    raise WrongQuery(f"Unsupported search operator: {operator!r}")


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """A search query assembled from operators, joined by single spaces."""

    operators: tuple[QueryOperator, ...]

    def __init__(self, *operators: QueryOperator) -> None:
        object.__setattr__(self, "operators", tuple(operators))

    def __str__(self) -> str:
        return " ".join(_render_operator(operator) for operator in self.operators)


QueryStr = Union[str, SearchQuery]


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class QueryParams:
    """Options of the change-query endpoint."""

    search_queries: Sequence[QueryStr] | None = None
    additional_opts: Sequence[AdditionalOpt] | None = None
    limit: int | None = None
    start: int | None = None

    def pairs(self) -> list[tuple[str, str]]:
        """Return the ``(name, value)`` pairs in wire order.

        Raises
        ------
        WrongQuery
            When a value cannot be represented as a query parameter.
        """
        result: list[tuple[str, str]] = []
        for query in self.search_queries or ():
            result.append(("q", _render_query(query)))
        for opt in self.additional_opts or ():
            result.append(("o", _render_option(opt)))
        if self.limit is not None:
            result.append(("n", _render_count("limit", self.limit)))
        if self.start is not None:
            result.append(("S", _render_count("start", self.start)))
        return result

    @property
    def query_count(self) -> int:
        return len(self.search_queries or ())


def _render_query(query: QueryStr) -> str:
    if isinstance(query, SearchQuery):
        return str(query)
    if isinstance(query, str):
        return query
    raise WrongQuery(f"Search query must be a string or SearchQuery, got {type(query).__name__}")


def _render_option(opt: AdditionalOpt | str) -> str:
    try:
        return AdditionalOpt(opt).value
    except ValueError as exc:
        raise WrongQuery(f"Unknown additional option: {opt!r}") from exc


def _render_count(name: str, value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise WrongQuery(f"{name} must be a non-negative integer, got {value!r}")
    return str(value)


def encode_query(
    pairs: Iterable[tuple[str, str]] = (),
    flags: Iterable[str] = (),
) -> str:
    """Encode *pairs* plus value-less *flags* into a ``?``-prefixed string.

    Returns an empty string when there is nothing to encode, so the
    result can always be appended to a path.
    """
    parts: list[str] = []
    encoded = str(httpx.QueryParams(list(pairs)))
    if encoded:
        parts.append(encoded)
    parts.extend(flags)
    if not parts:
        return ""
    return "?" + "&".join(parts)

