"""
Table value objects.

- Alignment: LEFT, CENTER, RIGHT placement of text within a column.
- TextStyle: how one column is laid out (alignment, padding, indentation and
  width bounds). Immutable.
- TableDefinition: headers, per-column styles, rows of string cells and an
  optional caption. Immutable; build it with TableDefinition.of(...).

Widths are only used to pad cells; wrapping long text is out of scope.
"""
import enum
import sys
from collections.abc import Iterable
from typing import NamedTuple

from .utils import coalesce


class Alignment(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextStyle(NamedTuple):
    """
    Layout of a single column.

    Fields
    - alignment: Alignment of cell text within the column width.
    - left_pad: spaces written before the column.
    - indent: spaces written before the cell text (part of the column).
    - scalable: whether a layout engine may shrink the column.
    - min_width / max_width: bounds for the computed column width.
    """
    alignment: Alignment = Alignment.LEFT
    left_pad: int = 0
    indent: int = 0
    scalable: bool = True
    min_width: int = 0
    max_width: int = sys.maxsize

    def pad(self, text, width, /):
        """
        Return `text` indented and aligned inside a column of `width` characters.
        """
        text = " " * self.indent + text
        match self.alignment:
            case Alignment.CENTER:
                return text.center(width)
            case Alignment.RIGHT:
                return text.rjust(width)
            case _:
                return text.ljust(width)


TextStyle.DEFAULT = TextStyle()


class TableDefinition(NamedTuple):
    headers: tuple
    styles: tuple
    rows: tuple
    caption: str | None = None

    @classmethod
    def of(cls, caption, styles, headers, rows, /):
        """
        Build a table definition from loose iterables.

        - headers and each row are materialized as tuples of strings;
        - missing styles are filled with TextStyle.DEFAULT;
        - a row with more cells than there are headers raises ValueError;
          shorter rows are padded with empty cells.
        """
        if not isinstance(headers, Iterable) or isinstance(headers, str):
            raise TypeError("table 'headers' must be an iterable of strings")
        headers = tuple(map(str, headers))

        styles = tuple(coalesce(styles, ()) or ())
        if any(not isinstance(style, TextStyle) for style in styles):
            raise TypeError("table 'styles' must contain TextStyle instances")
        if len(styles) > len(headers):
            raise ValueError("table cannot have more styles than headers")
        styles += (TextStyle.DEFAULT,) * (len(headers) - len(styles))

        normalized = []
        for index, row in enumerate(rows or ()):
            row = tuple("" if cell is None else str(cell) for cell in row)
            if len(row) > len(headers):
                raise ValueError("table row %d has %d cells but only %d headers" % (index, len(row), len(headers)))
            normalized.append(row + ("",) * (len(headers) - len(row)))

        caption = coalesce(caption)
        return cls(headers, styles, tuple(normalized), None if caption is None else str(caption))

    @property
    def width(self):
        return len(self.headers)


__all__ = (
    "Alignment",
    "TextStyle",
    "TableDefinition",
)
