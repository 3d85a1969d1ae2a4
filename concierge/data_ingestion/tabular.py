from __future__ import annotations

import logging
from typing import Iterator

logger = logging.getLogger(__name__)

QUOTE = '"'


def split_line(line: str, delimiter: str = ",") -> list[str]:
    """
    Split one delimited line into its fields.

    Double-quoted fields may contain the delimiter; a doubled quote inside a
    field decodes to a single literal quote.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quote = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == QUOTE and line[i + 1 : i + 2] == QUOTE:
            current.append(QUOTE)
            i += 1
        elif char == QUOTE:
            in_quote = not in_quote
        elif char == delimiter and not in_quote:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current))
    return fields


def iter_rows(text: str, min_fields: int = 5) -> Iterator[tuple[int, list[str]]]:
    """
    Yield ``(row_index, fields)`` for every data row of *text*.

    Row 0 is the header and is never yielded. Rows with fewer than
    *min_fields* fields are skipped silently.
    """
    # Only "\n" ends a row; other line separators can sit inside quotes.
    lines = text.strip().split("\n")
    for index, line in enumerate(lines[1:], start=1):
        line = line.removesuffix("\r")
        try:
            fields = split_line(line)
        except Exception:
            logger.warning("Failed to split row %d", index, exc_info=True)
            continue
        if len(fields) < min_fields:
            continue
        yield index, fields
