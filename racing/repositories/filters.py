"""Compilation of race list filters into query predicates."""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import BinaryExpression, BindParameter, ColumnElement, Select, and_

from racing.models import Race
from racing.schemas import ListRacesFilter


@dataclass(frozen=True)
class CompiledFilter:
    """Predicates for a race listing, each carrying its own bound values."""

    clauses: tuple[ColumnElement[bool], ...] = ()

    @property
    def args(self) -> tuple[Any, ...]:
        """
        Values bound by the clauses, in placeholder order.

        Read from the clauses' bind parameters: every meeting id in the
        order supplied, then every visibility value.
        """
        args: list[Any] = []
        for clause in self.clauses:
            if isinstance(clause, BinaryExpression) and isinstance(clause.right, BindParameter):
                args.extend(clause.right.value)
        return tuple(args)

    def apply(self, query: Select) -> Select:
        """Add the conjunction of all clauses to ``query``."""
        if not self.clauses:
            return query
        return query.where(and_(*self.clauses))


def compile_race_filter(filter: ListRacesFilter | None) -> CompiledFilter:
    """
    Compile a filter into IN clauses joined with AND.

    An absent filter or an empty field adds no clause.
    """
    if filter is None:
        return CompiledFilter()

    clauses: list[ColumnElement[bool]] = []

    if filter.meeting_ids:
        clauses.append(Race.meeting_id.in_(filter.meeting_ids))

    if filter.visible:
        clauses.append(Race.visible.in_(filter.visible))

    return CompiledFilter(clauses=tuple(clauses))
