"""Recognising which unique constraint an IntegrityError reports."""

from sqlalchemy import Table, UniqueConstraint
from sqlalchemy.exc import IntegrityError


def violates_unique_constraint(error: IntegrityError, table: Table, name: str) -> bool:
    """
    Return True if the error was raised by the named unique constraint.

    PostgreSQL names the constraint in the message; SQLite lists the
    table-qualified columns instead. Only the first line is read because
    PostgreSQL's DETAIL line echoes the offending key values.
    """
    constraint = next(
        c for c in table.constraints if isinstance(c, UniqueConstraint) and c.name == name
    )
    lines = str(error.orig).splitlines()
    message = lines[0] if lines else ""

    if f'"{name}"' in message:
        return True

    columns = ", ".join(f"{table.name}.{column.name}" for column in constraint.columns)
    return message == f"UNIQUE constraint failed: {columns}"
