"""
Column and tag inference over flattened board text.

The board page is read as a single string (the text content of ``<body>``).
Column headers render as ``"<Column> (<count>)"``, so a column's section is
the text between its header and the next header that follows it. Both
helpers here are pure functions over that string.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class TaskNotFoundError(LookupError):
    """Raised when a task name does not fall inside any column's section."""

    def __init__(self, task_name: str):
        self.task_name = task_name
        super().__init__(f"Could not determine column for task: {task_name}")


def column_marker(column: str) -> str:
    """Return the header prefix a column renders with, e.g. ``"Done ("``."""
    return f"{column} ("


def _section_end(board_text: str, start: int, column: str, columns: Sequence[str]) -> int:
    """Index of the nearest other column header after ``start``, or end of text."""
    end = len(board_text)
    for other in columns:
        if other == column:
            continue
        index = board_text.find(column_marker(other), start + 1)
        if start < index < end:
            end = index
    return end


def locate_column(board_text: str, task_name: str, columns: Sequence[str]) -> str:
    """
    Return the column whose section contains ``task_name``.

    Columns are tried in the given order. For each column present on the
    board, the first occurrence of the task name at or after the column
    header counts when it starts before the next header. Matching is an
    exact, case-sensitive substring search.

    Args:
        board_text: Flattened visible text of the board.
        task_name: Task title to look for.
        columns: Known column names in board order.

    Returns:
        Name of the column holding the task.

    Raises:
        TaskNotFoundError: If no column section contains the task name.
    """
    for column in columns:
        start = board_text.find(column_marker(column))
        if start == -1:
            continue

        end = _section_end(board_text, start, column, columns)
        task_index = board_text.find(task_name, start)
        if start <= task_index < end:
            return column

    raise TaskNotFoundError(task_name)


def locate_tags(board_text: str, candidate_tags: Iterable[str]) -> set[str]:
    """
    Return the candidate tags that appear anywhere in ``board_text``.

    Detection is page-global: tags are not tied to a particular task card.
    """
    return {tag for tag in candidate_tags if tag in board_text}
