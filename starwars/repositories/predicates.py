"""Filter predicate assembly for list and count queries."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, and_, or_, true

LIKE_ESCAPE_CHAR = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so `term` matches literally."""
    return (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", f"{LIKE_ESCAPE_CHAR}%")
        .replace("_", f"{LIKE_ESCAPE_CHAR}_")
    )


class PredicateBuilder:
    """Collects optional filter clauses and folds them with AND.

    Absent filter values add nothing. An empty builder matches every row,
    so a list query and its count query built from the same builder calls
    always see the same rows.
    """

    def __init__(self) -> None:
        self._clauses: list[ColumnElement[bool]] = []

    def __len__(self) -> int:
        return len(self._clauses)

    def contains(self, *columns: Any, term: str | None) -> PredicateBuilder:
        """Case-insensitive substring match on any of `columns`."""
        if not term:
            return self
        pattern = f"%{escape_like(term)}%"
        matches = [column.ilike(pattern, escape=LIKE_ESCAPE_CHAR) for column in columns]
        self._clauses.append(matches[0] if len(matches) == 1 else or_(*matches))
        return self

    def equals(self, column: Any, value: Any | None) -> PredicateBuilder:
        if value is None:
            return self
        self._clauses.append(column == value)
        return self

    def build(self) -> ColumnElement[bool]:
        if not self._clauses:
            return true()
        return and_(*self._clauses)
