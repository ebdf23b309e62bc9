"""Graph source loaded from a flat text file.

One item per line: the item id followed by the ids it depends on, all
separated by whitespace. A trailing colon on the id is accepted, blank
lines are skipped, and ``#`` starts a comment::

    # name    depends on
    core
    a:        core
    b         a
"""

from __future__ import annotations

import logging
from pathlib import Path

from depresolve.core.dependency.item import Item
from depresolve.core.dependency.source import GraphSource
from depresolve.exceptions import SourceFormatError

logger = logging.getLogger(__name__)


def parse_lines(lines: list[str], path: Path | None = None) -> list[Item]:
    """Parse flat-file lines into items.

    Args:
        lines: Raw text lines.
        path: File the lines came from, used in log and error messages.

    Returns:
        One ``Item`` per non-empty, non-comment line.

    Raises:
        SourceFormatError: If an id appears on more than one line.
    """
    items: list[Item] = []
    seen: dict[str, int] = {}
    for lineno, raw in enumerate(lines, start=1):
        text = raw.split("#", 1)[0].strip()
        if not text:
            continue
        tokens = text.split()
        item_id = tokens[0].rstrip(":")
        if not item_id:
            logger.warning("Skipping line %d of %s: missing item id", lineno, path or "<text>")
            continue
        if item_id in seen:
            raise SourceFormatError(
                f"item {item_id!r} on line {lineno} already defined on line {seen[item_id]}",
                path,
            )
        seen[item_id] = lineno
        items.append(Item(item_id, tuple(tokens[1:])))
    return items


class FileSource(GraphSource):
    """Source reading items from a flat dependency file.

    The file is read on first access, not at construction.

    Args:
        path: Path to the dependency file.
    """

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)

    def _load_items(self) -> list[Item]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceFormatError(f"cannot read file: {exc}", self.path) from exc
        return parse_lines(text.splitlines(), self.path)
