"""
Helpwright help formatters: options in, help writer calls out.

What this module provides
- AbstractHelpFormatter: links a HelpWriter with a FormatterBuilder and a
  table layout to produce a standard help page:
  • print_help(): usage line, header, option table, footer.
  • print_options(): the option table alone.
  • sort(): options ordered by the configured comparator.
  • to_syntax_options(): the usage-line fragment for options, Options or a group.
- HelpFormatter: the concrete formatter with the default option table
  ("Options", "Since", "Description").

Configuration
- Keyword-only constructor parameters (builder, comparator, group_separator,
  syntax_prefix); Unset keeps the defaults below. The comparator and the
  syntax prefix can be changed afterwards through their properties.

Quick example
    import io
    from helpwright import HelpFormatter, Option, OptionGroup, Options, TextHelpWriter

    sink = io.StringIO()
    options = Options(Option("a", required=True)).add_group(OptionGroup(Option("b"), Option("c")))
    HelpFormatter(TextHelpWriter(sink)).print_help("prog", None, options, None, True)
    sink.getvalue().splitlines()[0]  # 'usage: prog -a [-b | -c]'
"""
import functools
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .faults import MissingSyntaxError
from .formatting import FormatterBuilder
from .options import OptionGroup, Options
from .tables import Alignment, TableDefinition, TextStyle
from .utils import *
from .writers import HelpWriter, TextHelpWriter

logger = logging.getLogger(__name__)

DEFAULT_SYNTAX_PREFIX = "usage: "
"""The phrase displayed at the beginning of the usage statement."""

DEFAULT_OPTION_GROUP_SEPARATOR = " | "
"""The separator placed between the members of an option group."""

DEFAULT_LEFT_PAD = 1
DEFAULT_COLUMN_SPACING = 5


def DEFAULT_COMPARATOR(left, right, /):
    """
    Compare two options by key, ignoring case (cmp-style: <0, 0, >0).
    """
    left, right = left.key.lower(), right.key.lower()
    return (left > right) - (left < right)


class AbstractHelpFormatter(ABC):
    """
    Framework shared by help formatters.

    Subclasses decide the option table layout by implementing
    get_table_definition(); everything else (usage line, sorting, grouping)
    lives here.
    """

    def __init__(
            self,
            writer,
            /,
            *,
            builder=Unset,
            comparator=Unset,
            group_separator=Unset,
            syntax_prefix=Unset,
    ):
        if not isinstance(writer, HelpWriter):
            raise TypeError(f"{type(self).__name__} writer must be a help writer")
        if not isinstance(builder := coalesce(builder, FormatterBuilder()), FormatterBuilder):
            raise TypeError(f"{type(self).__name__} builder must be a formatter builder")
        if not isinstance(group_separator := coalesce(group_separator, DEFAULT_OPTION_GROUP_SEPARATOR) or "", str):
            raise TypeError(f"{type(self).__name__} group separator must be a string")

        self._writer = writer
        self._builder = builder
        self._group_separator = group_separator
        self.comparator = coalesce(comparator, DEFAULT_COMPARATOR)
        self.syntax_prefix = coalesce(syntax_prefix, DEFAULT_SYNTAX_PREFIX)

    writer = mirror("writer")
    builder = mirror("builder")
    group_separator = mirror("group_separator")

    @property
    def serializer(self):
        return self._writer

    @property
    def comparator(self):
        return self._comparator

    @comparator.setter
    def comparator(self, comparator):
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._comparator = comparator

    @property
    def syntax_prefix(self):
        return self._syntax_prefix

    @syntax_prefix.setter
    def syntax_prefix(self, prefix):
        if not isinstance(prefix, str):
            raise TypeError("syntax prefix must be a string")
        self._syntax_prefix = prefix

    def option_formatter(self, option, /):
        return self._builder.build(option)

    def to_arg_name(self, name, /):
        return self._builder.to_arg_name(name)

    @abstractmethod
    def get_table_definition(self, options, /):
        """
        Convert a collection of options into a TableDefinition.
        """

    def print_help(self, syntax, header=None, options=None, footer=None, auto_usage=False):
        """
        Print the help for a collection of options.

        Parameters
        - syntax: command line syntax of the application (usually its name).
        - header: text displayed before the option table (skipped when empty).
        - options: Options or any iterable of Option.
        - footer: text displayed after the option table (skipped when empty).
        - auto_usage: append the generated option syntax to the usage line.

        Raises
        - MissingSyntaxError: when syntax is empty. Nothing is written then.
        """
        if isempty(syntax):
            raise MissingSyntaxError("cmd line syntax not provided")
        logger.debug("printing help for %r (auto_usage=%s)", syntax, auto_usage)

        parts = [self._syntax_prefix.rstrip(), syntax]
        if auto_usage:
            parts.append(self.to_syntax_options(options))
        self._writer.append_paragraph(" ".join(part for part in parts if part))

        if not isempty(header):
            self._writer.append_paragraph(header)
        self._writer.append_table(self.get_table_definition(options))
        if not isempty(footer):
            self._writer.append_paragraph(footer)

    def print_options(self, options, /):
        """
        Print the option table for Options, an iterable of Option or a ready TableDefinition.
        """
        if not isinstance(options, TableDefinition):
            options = self.get_table_definition(options)
        self._writer.append_table(options)

    def sort(self, options, /):
        """
        Return a new list of options ordered by the comparator (stable; [] for None).
        """
        if options is None:
            return []
        if not isinstance(options, Iterable):
            raise TypeError("sort() argument must be an iterable of options")
        return sorted(options, key=functools.cmp_to_key(self._comparator))

    def to_syntax_options(self, options, lookup=Unset, /):
        """
        Return the string representation of options as used in the usage line.

        - OptionGroup: members joined by the group separator, wrapped in the
          optional delimiters unless the group is required ("" when empty).
        - Options: grouped options are resolved with Options.get_group().
        - any other iterable: lookup(option) resolves groups (default: none).
        A group only shows the members it still owns among the given options.
        """
        match options:
            case OptionGroup():
                return self._group_syntax(options)
            case Options():
                return self._options_syntax(options, coalesce(lookup, options.get_group))
            case _:
                return self._options_syntax(options, coalesce(lookup, lambda option: None))

    def _options_syntax(self, options, lookup, /):
        options = self.sort(options)
        present = set(map(id, options))
        processed = set()
        fragments = []
        for option in options:
            if (group := lookup(option)) is None:
                fragments.append(self._builder.build(option).to_syntax_option())
            elif group not in processed:
                processed.add(group)
                # stale members (replaced or bound to another group) stay out
                fragments.append(self._group_syntax(
                    group, lambda member, group=group: id(member) in present and lookup(member) is group
                ))
            # otherwise the option was displayed with its group already
        return " ".join(fragment for fragment in fragments if fragment)

    def _group_syntax(self, group, accept=Unset, /):
        # whether an option is required is decided at group level
        accept = coalesce(accept, lambda member: True)
        fragments = [
            self._builder.build(option).to_syntax_option(True) for option in self.sort(group) if accept(option)
        ]
        if not fragments:
            return ""
        syntax = self._group_separator.join(fragments)
        return syntax if group.required else self._builder.to_optional(syntax)


class HelpFormatter(AbstractHelpFormatter):
    """
    Default help formatter.

    The option table has an "Options" column (names and argument), an optional
    "Since" column (centered, toggled by show_since) and a "Description" column.
    The writer defaults to a TextHelpWriter on sys.stdout.
    """

    def __init__(self, writer=Unset, /, *, show_since=True, **options):
        super().__init__(TextHelpWriter() if writer is Unset else writer, **options)
        self._show_since = bool(show_since)

    show_since = mirror("show_since")

    def get_table_definition(self, options, /):
        styles = [TextStyle(alignment=Alignment.LEFT, indent=DEFAULT_LEFT_PAD, scalable=False)]
        if self._show_since:
            styles.append(TextStyle(alignment=Alignment.CENTER, left_pad=DEFAULT_COLUMN_SPACING))
        styles.append(TextStyle(alignment=Alignment.LEFT, left_pad=DEFAULT_COLUMN_SPACING))

        rows = []
        for option in self.sort(options):
            formatter = self.option_formatter(option)
            names = " ".join(part for part in (formatter.both_opt, formatter.arg_name) if part)
            if self._show_since:
                rows.append((names, formatter.since, formatter.description))
            else:
                rows.append((names, formatter.description))

        headers = ("Options", "Since", "Description") if self._show_since else ("Options", "Description")
        logger.debug("built option table with %d rows", len(rows))
        return TableDefinition.of("", styles, headers, rows)


__all__ = (
    "DEFAULT_SYNTAX_PREFIX",
    "DEFAULT_OPTION_GROUP_SEPARATOR",
    "DEFAULT_LEFT_PAD",
    "DEFAULT_COLUMN_SPACING",
    "DEFAULT_COMPARATOR",
    "AbstractHelpFormatter",
    "HelpFormatter",
)
