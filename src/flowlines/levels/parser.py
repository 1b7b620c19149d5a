"""Parser for the plain-text level catalog.

A catalog is a sequence of blocks, each introduced by a line reading
``Level``. The first line of a block is ``rows,cols``; every further line
is ``COLOR;row,col;row,col``. Blank lines and ``#`` comments are skipped.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from flowlines.components.color import Color
from flowlines.levels.definition import LevelDefinition, Position

logger = logging.getLogger(__name__)

LEVEL_SEPARATOR = "Level"


class LevelFormatError(ValueError):
    """Raised for malformed level text."""

    def __init__(self, message: str, *, level_id: int | None = None, line: str | None = None):
        self.level_id = level_id
        self.line = line
        prefix = f"Level {level_id}: " if level_id is not None else ""
        suffix = f" (line: {line!r})" if line is not None else ""
        super().__init__(f"{prefix}{message}{suffix}")


def _meaningful_lines(text: str) -> List[str]:
    lines = []
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if line:
            lines.append(line)
    return lines


def _parse_pair(token: str, level_id: int, line: str) -> Tuple[int, int]:
    parts = token.split(",")
    if len(parts) != 2:
        raise LevelFormatError(f"expected 'a,b', got {token!r}", level_id=level_id, line=line)
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise LevelFormatError(f"non-integer coordinate {token!r}", level_id=level_id, line=line) from None


def _parse_lines(lines: Iterable[str], level_id: int) -> LevelDefinition:
    lines = list(lines)
    if not lines:
        raise LevelFormatError("empty level", level_id=level_id)
    rows, cols = _parse_pair(lines[0], level_id, lines[0])
    if rows <= 0 or cols <= 0:
        raise LevelFormatError("dimensions must be positive", level_id=level_id, line=lines[0])
    anchors: Dict[Color, Tuple[Position, Position]] = {}
    for line in lines[1:]:
        fields = [f.strip() for f in line.split(";")]
        if len(fields) != 3:
            raise LevelFormatError("expected 'COLOR;r,c;r,c'", level_id=level_id, line=line)
        try:
            color = Color.from_name(fields[0])
        except ValueError as exc:
            raise LevelFormatError(str(exc), level_id=level_id, line=line) from None
        if color in anchors:
            raise LevelFormatError(f"color {color.name} listed twice", level_id=level_id, line=line)
        first = _parse_pair(fields[1], level_id, line)
        second = _parse_pair(fields[2], level_id, line)
        for row, col in (first, second):
            if not (0 <= row < rows and 0 <= col < cols):
                raise LevelFormatError(
                    f"anchor ({row}, {col}) outside {rows}x{cols} board", level_id=level_id, line=line
                )
        if first == second:
            raise LevelFormatError("both anchors on the same cell", level_id=level_id, line=line)
        anchors[color] = (first, second)
    return LevelDefinition(level_id=level_id, rows=rows, cols=cols, anchors=anchors)


def parse_level(text: str, level_id: int) -> LevelDefinition:
    """Parse a single level block (without its ``Level`` header)."""
    return _parse_lines(_meaningful_lines(text), level_id)


def parse_levels(text: str) -> List[LevelDefinition]:
    """Parse a whole catalog; ids are assigned from 1 in file order."""
    blocks: List[List[str]] = []
    for line in _meaningful_lines(text):
        if line.lower() == LEVEL_SEPARATOR.lower():
            blocks.append([])
        elif not blocks:
            raise LevelFormatError(f"content before the first '{LEVEL_SEPARATOR}' header", line=line)
        else:
            blocks[-1].append(line)
    levels = [_parse_lines(block, level_id) for level_id, block in enumerate(blocks, start=1)]
    logger.debug("Parsed %d levels", len(levels))
    return levels
