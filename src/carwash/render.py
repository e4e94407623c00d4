from collections.abc import Iterable, Sequence

HORIZONTAL_BORDER_KNOT = "+"
HORIZONTAL_BORDER_PATTERN = "-"
VERTICAL_BORDER_PATTERN = "|"
PATH_SEPARATOR = "→"


def _horizontal_border(n_columns: int, width: int) -> str:
    segment = HORIZONTAL_BORDER_PATTERN * width + HORIZONTAL_BORDER_KNOT
    return HORIZONTAL_BORDER_KNOT + segment * n_columns


def _render_row(row: Sequence[str], width: int) -> str:
    cells = "".join(
        cell.rjust(width) + VERTICAL_BORDER_PATTERN for cell in row
    )
    return VERTICAL_BORDER_PATTERN + cells


def render_table(matrix: Sequence[Sequence[str]]) -> str:
    """Render a grid of strings as a bordered, right-aligned text table."""
    if not matrix:
        return ""

    n_columns = max(len(row) for row in matrix)
    width = max((len(cell) for row in matrix for cell in row), default=0)
    border = _horizontal_border(n_columns, width)

    lines = [border]
    for row in matrix:
        lines.append(_render_row(row, width))
        lines.append(border)
    return "\n".join(lines)


def format_state_path(history: Iterable[int]) -> str:
    return PATH_SEPARATOR.join(f"q{state}" for state in history)
