r"""
Helpwright option model.

Overview
- Option: one declared command-line switch (short and/or long name, optional
  argument, description, required/deprecated markers and a "since" version).
- OptionGroup: a set of mutually exclusive options with its own required flag.
- Options: an ordered collection of options that remembers which group each
  option was registered with.

These types only carry what help rendering needs; parsing and validation of
values happen elsewhere.

Introspection & representation
- OptionType metaclass provides stable __repr__/__rich_repr__ and exposes the
  fields declared in __introspectable__ as read-only properties.

Validation highlights
- Names are given without their leading hyphens (hyphens are stripped when
  present) and must match r"[^\W_][\w-]*", or be one of "?" / "@".
- At least one of the short or long name is required.
- descr/arg_name/since strings are trimmed; empty strings are rejected.

Quick example:
    >>> verbose = Option("v", "verbose", "print more")
    >>> output = Option("o", "output", "write to FILE", arg_name="FILE")
    >>> quiet, loud = Option("q"), Option("l")
    >>> options = Options(verbose, output).add_group(OptionGroup(quiet, loud))
    >>> options.get_group(quiet).required
    False
"""
import functools
import operator
import re
from collections.abc import Iterable

from .utils import *


class OptionType(type):
    """
    Metaclass for the option model types.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens)
      for messages.
    - Expose every name in __introspectable__ as a read-only property mirroring
      the private "_<name>" field.
    - Provide readable __repr__/__rich_repr__ implementations; __displayable__
      (if set) narrows what they show, otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise representation with key metadata.

            Example
            - option(opt='v', long_opt='verbose', ...)
            """
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_name(cls, field, name, /):
    """
    Internal: normalize one option name (None/Unset mean "absent").
    """
    if name is None or name is Unset:
        return None
    if not isinstance(name, str):
        raise TypeError(f"{cls.__typename__} '{field}' must be a string")
    if not (name := strip_hyphens(name.strip())):
        raise ValueError(f"{cls.__typename__} '{field}' cannot be empty")
    if not re.fullmatch(r"[^\W_][\w-]*|[?@]", name):
        raise ValueError(f"{cls.__typename__} '{field}' must be a valid option name (unicodes are allowed)")
    return name


def _sanitize_text(cls, field, text, /):
    """
    Internal: trim an optional text field; Unset becomes None, empty is rejected.
    """
    if text is Unset:
        return None
    if not isinstance(text, str):
        raise TypeError(f"{cls.__typename__} '{field}' must be a string")
    if not (text := text.strip()):
        raise ValueError(f"{cls.__typename__} '{field}' cannot be empty")
    return text


class Option(metaclass=OptionType):
    """
    A single declared command-line switch.

    Properties
    - opt: short name without hyphen ("v") or None.
    - long_opt: long name without hyphens ("verbose") or None.
    - key: opt when present, otherwise long_opt. Used for sorting and lookup.
    - descr: short description or None.
    - argument: whether the switch takes a value.
    - arg_name: display name for that value or None (setting it implies argument).
    - required, deprecated: markers used by help rendering.
    - since: version in which the option appeared, or None.
    """

    __introspectable__ = (
        "opt",
        "long_opt",
        "descr",
        "argument",
        "arg_name",
        "required",
        "since",
        "deprecated",
    )

    def __init__(
            self,
            opt=Unset,
            long_opt=Unset,
            descr=Unset,
            *,
            argument=False,
            arg_name=Unset,
            required=False,
            since=Unset,
            deprecated=False,
    ):
        cls = type(self)
        metadata = {
            "opt": _sanitize_name(cls, "opt", opt),
            "long_opt": _sanitize_name(cls, "long_opt", long_opt),
            "descr": _sanitize_text(cls, "descr", descr),
            "argument": bool(argument),
            "arg_name": _sanitize_text(cls, "arg_name", arg_name),
            "required": bool(required),
            "since": _sanitize_text(cls, "since", since),
            "deprecated": bool(deprecated),
        }
        if metadata["opt"] is None and metadata["long_opt"] is None:
            raise TypeError(f"{cls.__typename__} must specify at least one name")
        metadata["argument"] |= metadata["arg_name"] is not None

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def key(self):
        return self._opt if self._opt is not None else self._long_opt


class OptionGroup(metaclass=OptionType):
    """
    A set of mutually exclusive options; at most one may be supplied.

    Members are kept in insertion order and keyed by Option.key, so adding an
    option with an existing key replaces the previous one in place.
    """

    __introspectable__ = ("required",)
    __displayable__ = ("options", "required")

    def __init__(self, *options, required=False):
        self._members = {}
        self._required = bool(required)
        for option in options:
            self.add(option)

    def add(self, option, /):
        if not isinstance(option, Option):
            raise TypeError(f"{type(self).__typename__} members must be options")
        self._members[option.key] = option
        return self

    @property
    def options(self):
        return tuple(self._members.values())

    @property
    def names(self):
        return tuple(self._members)

    def __iter__(self):
        return iter(self.options)

    def __len__(self):
        return len(self._members)

    def __contains__(self, option, /):
        return isinstance(option, Option) and self._members.get(option.key) is option


class Options(metaclass=OptionType):
    """
    Ordered collection of options and the groups they belong to.

    - add(option | group): register an option (or every option of a group).
    - add_group(group): register the group's options and bind them to it.
    - get(name): look an option up by key or long name ("-v", "--verbose", "v").
    - get_group(option): the group the option was registered with, or None.
    """

    __displayable__ = ("options", "groups")

    def __init__(self, *items):
        self._options = {}
        self._groups = {}
        for item in items:
            self.add(item)

    def add(self, item, /):
        if isinstance(item, OptionGroup):
            return self.add_group(item)
        if not isinstance(item, Option):
            raise TypeError(f"{type(self).__typename__} accepts options and option groups only")
        self._options[item.key] = item
        return self

    def add_group(self, group, /):
        if not isinstance(group, OptionGroup):
            raise TypeError(f"{type(self).__typename__} groups must be option groups")
        for option in group:
            self._options[option.key] = option
            self._groups[option.key] = group
        return self

    def get(self, name, default=None, /):
        name = strip_hyphens(name)
        if name in self._options:
            return self._options[name]
        for option in self._options.values():
            if option.long_opt == name:
                return option
        return default

    def get_group(self, option, /):
        if not isinstance(option, Option):
            raise TypeError("get_group() argument must be an option")
        group = self._groups.get(option.key)
        return group if group is not None and option in group else None

    @property
    def options(self):
        return tuple(self._options.values())

    @property
    def groups(self):
        return tuple(dict.fromkeys(self._groups.values()))

    def __iter__(self):
        return iter(self.options)

    def __len__(self):
        return len(self._options)

    def __contains__(self, item, /):
        if isinstance(item, str):
            return self.get(item) is not None
        return isinstance(item, Option) and self._options.get(item.key) is item


__all__ = (
    "OptionType",
    "Option",
    "OptionGroup",
    "Options",
)
