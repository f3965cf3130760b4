"""
Helpwright help writers: structured content in, dialect text out.

What this module provides
- HelpWriter: the abstract writer. It owns an append-only sink and declares
  the five content operations (header, paragraph, list, table, title).
- TextHelpWriter: plain text dialect (default), no escaping.
- AptHelpWriter: APT (Almost Plain Text) dialect with its escaping rules.
- ConsoleHelpWriter: renders the same content on a rich Console.

Contract shared by every dialect
- Empty text (None or "") for headers, paragraphs and titles writes nothing.
- A None list or a None table writes nothing.
- append_header() rejects levels below 1 (InvalidHeaderLevelError).
- Text content goes through the dialect's escape translator; structural
  glyphs (markers, rules, separators) do not.
- Writes happen in call order, directly on the sink. A failure mid-way leaves
  whatever was already written in place.
"""
import logging
import sys
from abc import ABC, abstractmethod
from collections import defaultdict

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .escaping import ESCAPE_APT, ESCAPE_NONE
from .faults import InvalidHeaderLevelError
from .tables import Alignment, TableDefinition
from .utils import *

logger = logging.getLogger(__name__)


class HelpWriter(ABC):
    """
    Base class of every dialect.

    Class attributes
    - __escape__: LookupTranslator applied to text content.
    - __sink__: name of the method the output object must provide.
    """
    __escape__ = ESCAPE_NONE
    __sink__ = "write"

    def __init__(self, output, /):
        if not callable(getattr(output, type(self).__sink__, None)):
            raise TypeError(f"{type(self).__name__} output must provide a {type(self).__sink__}() method")
        self._output = output

    @property
    def output(self):
        return self._output

    def escape(self, text, /):
        return type(self).__escape__.translate(text)

    def _check_level(self, level, /):
        if not isinstance(level, int) or isinstance(level, bool):
            raise TypeError("header level must be an integer")
        if level < 1:
            raise InvalidHeaderLevelError("level must be at least 1 but %d was given" % level)

    def _check_table(self, table, /):
        if not isinstance(table, TableDefinition):
            raise TypeError("append_table() argument must be a table definition")

    @abstractmethod
    def append_header(self, level, text, /):
        ...

    @abstractmethod
    def append_paragraph(self, text, /):
        ...

    @abstractmethod
    def append_list(self, ordered, items, /):
        ...

    @abstractmethod
    def append_table(self, table, /):
        ...

    @abstractmethod
    def append_title(self, text, /):
        ...

    def append_paragraph_format(self, format, /, *args):
        """
        Append a paragraph built with printf-style formatting.
        """
        self.append_paragraph(format % args)


class TextHelpWriter(HelpWriter):
    """
    Plain text dialect.

    Layout
    - header: text underlined with "=" (level 1), "-" (level 2) or "~" (deeper).
    - paragraph: text followed by a blank line.
    - list: " 1. item" (ordered) or " * item" (bulleted), then a blank line.
    - table: aligned columns, a dashed rule under the headers, caption last.
    - title: text framed by "=" rules.

    No wrapping is performed; long cells simply widen their column.
    """
    __underlines__ = {1: "=", 2: "-"}

    def __init__(self, output=Unset, /):
        super().__init__(coalesce(output, sys.stdout))

    def append_header(self, level, text, /):
        if isempty(text):
            return
        self._check_level(level)
        text = self.escape(text)
        underline = filled(len(text), type(self).__underlines__.get(level, "~"))
        self._output.write(f"{text}\n{underline}\n\n")

    def append_paragraph(self, text, /):
        if isempty(text):
            return
        self._output.write(f"{self.escape(text)}\n\n")

    def append_list(self, ordered, items, /):
        if items is None:
            return
        for index, item in enumerate(items, 1):
            marker = f"{index}." if ordered else "*"
            self._output.write(f" {marker} {self.escape(item)}\n")
        self._output.write("\n")

    def append_table(self, table, /):
        if table is None:
            return
        self._check_table(table)
        logger.debug("writing %d x %d text table", len(table.rows), table.width)

        widths = []
        for index, (header, style) in enumerate(zip(table.headers, table.styles)):
            cells = [header, *(row[index] for row in table.rows)]
            widths.append(max(style.min_width, *(style.indent + len(self.escape(cell)) for cell in cells)))

        def gap(index, style):
            # Columns are always at least one space apart.
            return " " * max(style.left_pad, 1 if index else 0)

        def line(cells):
            parts = []
            for index, (cell, style, width) in enumerate(zip(cells, table.styles, widths)):
                parts.append(gap(index, style))
                parts.append(style.pad(self.escape(cell), width))
            return "".join(parts).rstrip() + "\n"

        self._output.write(line(table.headers))
        self._output.write("".join(
            gap(index, style) + filled(width, "-")
            for index, (style, width) in enumerate(zip(table.styles, widths))
        ) + "\n")
        for row in table.rows:
            self._output.write(line(row))
        if not isempty(table.caption):
            self._output.write(f"{self.escape(table.caption)}\n")
        self._output.write("\n")

    def append_title(self, text, /):
        if isempty(text):
            return
        text = self.escape(text)
        rule = filled(len(text), "=")
        self._output.write(f"{rule}\n{text}\n{rule}\n\n")


class AptHelpWriter(HelpWriter):
    """
    APT (Almost Plain Text) dialect.

    Layout
    - header: one "*" per level, a space, the text, a blank line.
    - paragraph: two-space indent, blank line after.
    - list: "    [[n]] item" (ordered) or "    * item" (bulleted), blank line after.
    - table: "*" + per column dashes (header length + 2) and a boundary glyph
      chosen by alignment (LEFT "+", CENTER "*", RIGHT ":"); header row and
      each data row are followed by that separator; caption after the rows.
    - title: the text between two "-----" rules, then repeated as a line.
    """
    __escape__ = ESCAPE_APT
    __boundaries__ = {
        Alignment.LEFT: "+",
        Alignment.CENTER: "*",
        Alignment.RIGHT: ":",
    }

    def __init__(self, output=Unset, /):
        super().__init__(coalesce(output, sys.stdout))

    def append_header(self, level, text, /):
        if isempty(text):
            return
        self._check_level(level)
        self._output.write(filled(level, "*"))
        self._output.write(f" {self.escape(text)}\n\n")

    def append_paragraph(self, text, /):
        if isempty(text):
            return
        self._output.write(f"  {self.escape(text)}\n\n")

    def append_list(self, ordered, items, /):
        if items is None:
            return
        if ordered:
            for index, item in enumerate(items, 1):
                self._output.write(f"    [[{index}]] {self.escape(item)}\n")
        else:
            for item in items:
                self._output.write(f"    * {self.escape(item)}\n")
        self._output.write("\n")

    def append_table(self, table, /):
        if table is None:
            return
        self._check_table(table)
        logger.debug("writing %d x %d apt table", len(table.rows), table.width)

        separator = "*" + "".join(
            filled(len(header) + 2, "-") + type(self).__boundaries__[style.alignment]
            for header, style in zip(table.headers, table.styles)
        ) + "\n"

        self._output.write(separator)
        self._output.write("|" + "".join(f" {self.escape(header)} |" for header in table.headers))
        self._output.write("\n" + separator)

        for row in table.rows:
            self._output.write("|" + "".join(f" {self.escape(cell)} |" for cell in row))
            self._output.write("\n" + separator)

        if not isempty(table.caption):
            self._output.write(f"{self.escape(table.caption)}\n")

        self._output.write("\n")

    def append_title(self, text, /):
        if isempty(text):
            return
        text = self.escape(text)
        self._output.write(f"        -----\n        {text}\n        -----\n\n{text}\n\n")


class ConsoleHelpWriter(HelpWriter):
    """
    Rich console dialect.

    Palette keys
    - title, header-1, header-2, header, paragraph
    - list-marker, list-item
    - table-header, table-border, table-cell, table-caption

    Customization
    - Define a mapping named __styles__ in __main__ to override any palette entry.
    - When colorful is False, styling is suppressed.

    Tables
    - Column borders replace left_pad; indent, scalable, min_width and
      max_width map onto the rich column.
    """
    __sink__ = "print"

    def __init__(self, console=Unset, /, *, colorful=True):
        super().__init__(Console() if console is Unset else console)
        self._colorful = bool(colorful)

    colorful = mirror("colorful")

    def _styler(self):
        styles = defaultdict(str, {
            "title": "bold #FF4D94",  # MAGENTA-PINK → brand pop
            "header-1": "bold #00E6FF",  # CYAN
            "header-2": "bold #36C5F0",  # SKY-BLUE → softer than cyan
            "header": "bold #FFFFFF",
            "paragraph": "#D1D5DB",
            "list-marker": "#00E6FF dim",
            "list-item": "#E5E7EB",
            "table-header": "bold #FFFFFF",
            "table-border": "#4B5563",  # Slate border
            "table-cell": "#9CA3AF",
            "table-caption": "italic #737373",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if self._colorful else ""

        return styler

    def _text(self, fragment, style=""):
        return Text(self.escape(fragment), style)

    def append_header(self, level, text, /):
        if isempty(text):
            return
        self._check_level(level)
        styler = self._styler()
        style = styler(f"header-{level}") if level <= 2 else styler("header")
        self._output.print(self._text(text, style))
        self._output.print()

    def append_paragraph(self, text, /):
        if isempty(text):
            return
        self._output.print(self._text(text, self._styler()("paragraph")))
        self._output.print()

    def append_list(self, ordered, items, /):
        if items is None:
            return
        styler = self._styler()
        for index, item in enumerate(items, 1):
            marker = f" {index}. " if ordered else " • "
            self._output.print(Text.assemble(
                self._text(marker, styler("list-marker")),
                self._text(item, styler("list-item")),
            ))
        self._output.print()

    def append_table(self, table, /):
        if table is None:
            return
        self._check_table(table)
        logger.debug("writing %d x %d console table", len(table.rows), table.width)
        styler = self._styler()

        renderable = Table(
            box=ROUNDED,
            style=styler("table-border"),
            header_style=styler("table-header"),
            caption=self._text(table.caption, styler("table-caption")) if not isempty(table.caption) else None,
        )
        for header, style in zip(table.headers, table.styles):
            renderable.add_column(
                self._text(header),
                justify=style.alignment.value,
                no_wrap=not style.scalable,
                min_width=style.min_width or None,
                max_width=None if style.max_width == sys.maxsize else style.max_width,
            )
        for row in table.rows:
            renderable.add_row(*(self._text(" " * style.indent + cell, styler("table-cell"))
                                 for cell, style in zip(row, table.styles)))

        self._output.print(renderable)
        self._output.print()

    def append_title(self, text, /):
        if isempty(text):
            return
        self._output.print(Panel(self._text(text, self._styler()("title")), box=ROUNDED, expand=False))
        self._output.print()


__all__ = (
    "HelpWriter",
    "TextHelpWriter",
    "AptHelpWriter",
    "ConsoleHelpWriter",
)
