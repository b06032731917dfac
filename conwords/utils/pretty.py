"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..core.constants import PLACEHOLDER, Orientation

if TYPE_CHECKING:
    from ..engine.grid import Grid


# layer 0 shows letters, layer 1 vertical coverage, layer 2 horizontal coverage
LETTERS, VERTICAL_LAYER, HORIZONTAL_LAYER = 0, 1, 2


def pad(text: object, width: int) -> str:
    """Left-align ``text`` in exactly ``width`` characters."""

    if not isinstance(text, str):
        return PLACEHOLDER
    if len(text) >= width:
        return text[:width]
    return text + " " * (width - len(text))


def cell_symbol(grid: Grid, x: int, y: int, layer: int = LETTERS) -> str:
    cell = grid.cell(x, y)
    if layer == VERTICAL_LAYER:
        return "#" if cell.vertical else grid.empty_space
    if layer == HORIZONTAL_LAYER:
        return "#" if cell.horizontal else grid.empty_space
    return cell.letter.upper()


def format_grid(grid: Grid, layer: int = LETTERS) -> str:
    lines = [
        "    " + "".join(f"{x // 10} " for x in range(grid.width)),
        "    " + "".join(f"{x % 10} " for x in range(grid.width)),
        "",
    ]
    for y in range(grid.height):
        cells = "".join(f"{cell_symbol(grid, x, y, layer)} " for x in range(grid.width))
        lines.append(f"{y:02d}  {cells}")
    return "\n".join(lines)


def format_questions(records: Sequence[Dict[str, Any]]) -> str:
    """List ``question_records`` output by orientation, each block in reading order."""

    blocks: List[str] = []
    for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
        horizontal = orientation == Orientation.HORIZONTAL
        listed = sorted(
            (r for r in records if r["horizontal"] == horizontal),
            key=lambda r: (r["y"], r["x"]),
        )
        lines = [f"{orientation.value}:"]
        lines.extend(
            f"{r['x']:02d}{r['y']:02d}:{r['word']}: {r['question'] or PLACEHOLDER}"
            for r in listed
        )
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_summary(grid: Grid, seed: Optional[str] = None) -> str:
    total = grid.width * grid.height
    percent = f"{round(100 * grid.fill_count / total)}" if grid.fill_count else ""
    return "\n".join(
        [
            f"SUMMARY ({seed})",
            "-------------------",
            f"SIZE: {grid.width}x{grid.height}",
            f"HASH: {grid.hash}",
            f"CROSSES: {grid.crossing_count}",
            f"ISOLATED WORDS: {grid.isolated_count}",
            f"FILL: {grid.fill_count} {percent}%",
            f"SCORE: {grid.score:.2f}",
        ]
    )


def format_solutions(
    grids: Sequence[Grid],
    *,
    questions: Optional[Sequence[Sequence[Dict[str, Any]]]] = None,
    layer: int = LETTERS,
    visible_solutions: int = 1,
    seed: Optional[str] = None,
) -> str:
    """Render the best grids side by side, then their clue listings and a summary.

    ``questions`` holds one ``question_records`` list per visible grid.
    """

    if not grids:
        return ""
    visible = list(grids[:visible_solutions])
    blocks = [format_grid(grid, layer).split("\n") for grid in visible]
    height = max(len(block) for block in blocks)
    column = max(26, grids[0].width * 2 + 5)

    rows: List[str] = []
    for index in range(height):
        rows.append("".join(pad(block[index] if index < len(block) else "", column) for block in blocks))
    text = "\n".join(rows)

    if questions is not None:
        for records in questions[:visible_solutions]:
            text += "\n\n" + format_questions(records)

    return f"{text}\n\n{format_summary(grids[0], seed)}"


def pretty_print_solutions(grids: Sequence[Grid], *, stream=None, **kwargs) -> None:
    """Print the rendered solutions in a human-friendly format."""

    stream = stream or sys.stdout
    print(format_solutions(grids, **kwargs), file=stream)
