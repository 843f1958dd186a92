"""Search predicate assembly.

Every user-influenced value travels as a named bind parameter (``p1``,
``p2``, ... in emission order); nothing the caller sends is ever placed in
the SQL text. Clauses are combined with AND only.
"""

import operator
from dataclasses import dataclass, field
from typing import Any, List, Optional

import structlog
from sqlalchemy import and_, bindparam, true

from .filters import parse_op_filter
from .models import Recipe
from .nutrients import calories_expression

log = structlog.get_logger("recipe_browser.predicates")

COMPARATORS = {
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
    "=": operator.eq,
}


@dataclass
class SearchFilters:
    title: Optional[str] = None
    cuisine: Optional[str] = None
    rating: Optional[str] = None
    total_time: Optional[str] = None
    calories: Optional[str] = None


@dataclass
class PredicateSet:
    clauses: List[Any] = field(default_factory=list)
    params: List[Any] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)

    def _next_param(self, value):
        self.params.append(value)
        return bindparam(f"p{len(self.params)}", value)

    def add(self, name, make_clause, value):
        """Append ``make_clause(param)`` with ``value`` bound to a fresh placeholder."""
        self.clauses.append(make_clause(self._next_param(value)))
        self.fields.append(name)

    def where(self):
        if not self.clauses:
            return true()
        return and_(*self.clauses)

    def __len__(self):
        return len(self.clauses)


def _compare(column, name, raw, predicates):
    parsed = parse_op_filter(raw)
    if parsed is None:
        if raw:
            log.debug("ignoring malformed filter", field=name, value=raw)
        return
    compare = COMPARATORS[parsed.op]
    predicates.add(name, lambda param: compare(column, param), parsed.value)


def build_predicates(filters: SearchFilters) -> PredicateSet:
    """Translate the optional search fields into a parameterized conjunction."""
    predicates = PredicateSet()
    if filters.title:
        predicates.add("title", Recipe.title.ilike, f"%{filters.title}%")
    if filters.cuisine:
        predicates.add("cuisine", lambda param: Recipe.cuisine == param, filters.cuisine)
    _compare(Recipe.rating, "rating", filters.rating, predicates)
    _compare(Recipe.total_time, "total_time", filters.total_time, predicates)
    # unparseable or missing calorie text counts as 0 calories
    _compare(calories_expression(), "calories", filters.calories, predicates)
    return predicates
