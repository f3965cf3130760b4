"""
Per-option rendering.

- FormatterBuilder: holds the decoration settings (prefixes, separators,
  delimiters, default argument name, deprecated format) and builds one
  OptionFormatter per Option.
- OptionFormatter: renders the strings help screens need for a single option:
  its names, argument name, description, "since" column and its fragment in
  the usage (syntax) line.

Examples (default settings)
    >>> formatter = FormatterBuilder().build(Option("f", "file", arg_name="path"))
    >>> formatter.both_opt, formatter.arg_name
    ('-f, --file', '<path>')
    >>> formatter.to_syntax_option()
    '[-f <path>]'
    >>> formatter.to_syntax_option(True)
    '-f <path>'
"""
from .options import Option
from .utils import *

DEFAULT_OPT_PREFIX = "-"
DEFAULT_LONG_OPT_PREFIX = "--"
DEFAULT_OPT_ARG_SEPARATOR = " "
DEFAULT_OPT_SEPARATOR = ", "
DEFAULT_ARG_NAME_DELIMITERS = ("<", ">")
DEFAULT_OPTIONAL_DELIMITERS = ("[", "]")
DEFAULT_ARG_NAME = "arg"
DEFAULT_SINCE = "--"


def DEFAULT_DEPRECATED_FORMAT(option, /):
    """
    Prefix the description of a deprecated option with "[Deprecated]".
    """
    return "[Deprecated] " + (option.descr or "")


def _delimiters(cls, field, pair, /):
    if not isinstance(pair, tuple | list) or len(pair) != 2 or not all(isinstance(x, str) for x in pair):
        raise TypeError(f"{cls.__name__} '{field}' must be a pair of strings")
    return tuple(pair)


class FormatterBuilder:
    """
    Factory of OptionFormatter instances sharing one set of decorations.

    Every parameter is keyword-only and optional; Unset keeps the default.
    """

    def __init__(
            self,
            *,
            opt_prefix=Unset,
            long_opt_prefix=Unset,
            opt_arg_separator=Unset,
            opt_separator=Unset,
            arg_delimiters=Unset,
            optional_delimiters=Unset,
            default_arg_name=Unset,
            deprecated_format=Unset,
    ):
        strings = {
            "opt_prefix": coalesce(opt_prefix, DEFAULT_OPT_PREFIX),
            "long_opt_prefix": coalesce(long_opt_prefix, DEFAULT_LONG_OPT_PREFIX),
            "opt_arg_separator": coalesce(opt_arg_separator, DEFAULT_OPT_ARG_SEPARATOR),
            "opt_separator": coalesce(opt_separator, DEFAULT_OPT_SEPARATOR),
            "default_arg_name": coalesce(default_arg_name, DEFAULT_ARG_NAME),
        }
        for name, value in strings.items():
            if not isinstance(value, str):
                raise TypeError(f"{type(self).__name__} '{name}' must be a string")
            setattr(self, "_" + name, value)

        self._arg_delimiters = _delimiters(
            type(self), "arg_delimiters", coalesce(arg_delimiters, DEFAULT_ARG_NAME_DELIMITERS)
        )
        self._optional_delimiters = _delimiters(
            type(self), "optional_delimiters", coalesce(optional_delimiters, DEFAULT_OPTIONAL_DELIMITERS)
        )

        if not callable(deprecated_format := coalesce(deprecated_format, DEFAULT_DEPRECATED_FORMAT)):
            raise TypeError(f"{type(self).__name__} 'deprecated_format' must be callable")
        self._deprecated_format = deprecated_format

    opt_prefix = mirror("opt_prefix")
    long_opt_prefix = mirror("long_opt_prefix")
    opt_arg_separator = mirror("opt_arg_separator")
    opt_separator = mirror("opt_separator")
    arg_delimiters = mirror("arg_delimiters")
    optional_delimiters = mirror("optional_delimiters")
    default_arg_name = mirror("default_arg_name")
    deprecated_format = mirror("deprecated_format")

    def build(self, option, /):
        if not isinstance(option, Option):
            raise TypeError("build() argument must be an option")
        return OptionFormatter(option, self)

    def to_arg_name(self, name, /):
        """
        Decorate an argument name ("file" -> "<file>"); empty names use the default.
        """
        opening, closing = self._arg_delimiters
        return opening + (self._default_arg_name if isempty(name) else name) + closing

    def to_optional(self, text, /):
        """
        Wrap text in the optional delimiters ("" stays "").
        """
        if isempty(text):
            return ""
        opening, closing = self._optional_delimiters
        return opening + text + closing


class OptionFormatter:
    """
    Renders the display strings of one option.

    Built by FormatterBuilder.build(); the builder supplies the decorations.
    """

    __slots__ = ("_option", "_builder")

    def __init__(self, option, builder, /):
        self._option = option
        self._builder = builder

    @property
    def option(self):
        return self._option

    @property
    def opt(self):
        if self._option.opt is None:
            return ""
        return self._builder.opt_prefix + self._option.opt

    @property
    def long_opt(self):
        if self._option.long_opt is None:
            return ""
        return self._builder.long_opt_prefix + self._option.long_opt

    @property
    def both_opt(self):
        return self._builder.opt_separator.join(name for name in (self.opt, self.long_opt) if name)

    @property
    def arg_name(self):
        if not self._option.argument:
            return ""
        return self._builder.to_arg_name(self._option.arg_name)

    @property
    def description(self):
        if self._option.deprecated:
            return self._builder.deprecated_format(self._option)
        return self._option.descr or ""

    @property
    def since(self):
        return self._option.since or DEFAULT_SINCE

    def to_optional(self, text, /):
        return self._builder.to_optional(text)

    def to_syntax_option(self, required=Unset, /):
        """
        Return the usage-line fragment for this option.

        The short name is preferred; the argument name follows when the option
        takes one. The fragment is wrapped in optional delimiters unless
        `required` (defaulting to the option's own flag) is true.
        """
        fragment = self.opt or self.long_opt
        if self._option.argument:
            fragment += self._builder.opt_arg_separator + self.arg_name
        return fragment if coalesce(required, self._option.required) else self.to_optional(fragment)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._option)


__all__ = (
    "DEFAULT_OPT_PREFIX",
    "DEFAULT_LONG_OPT_PREFIX",
    "DEFAULT_OPT_ARG_SEPARATOR",
    "DEFAULT_OPT_SEPARATOR",
    "DEFAULT_ARG_NAME_DELIMITERS",
    "DEFAULT_OPTIONAL_DELIMITERS",
    "DEFAULT_ARG_NAME",
    "DEFAULT_DEPRECATED_FORMAT",
    "FormatterBuilder",
    "OptionFormatter",
)
