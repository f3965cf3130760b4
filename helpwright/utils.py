"""
Helpwright utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the option model, the writers and the
  formatters so that "empty", "not provided" and "read-only" mean the same
  thing everywhere.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated callables.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr).

- isempty(text), filled(length, char), strip_hyphens(name)
  • Text helpers used by the writers and the option model.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> isempty(""), isempty(None), isempty(" ")
    (True, True, False)
    >>> filled(4, "-")
    '----'
"""
import builtins
import functools
import re
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations (e.g., str | UnsetType).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support reversed PEP 604 unions when UnsetType appears on the right.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable (updated in place)
    - rename(name)           -> decorator
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _immortalize(object):
    """
    Recursively copy container values so callers cannot mutate backing state.

    Sequences (other than strings) become tuples, mappings become dicts and
    sets become frozensets; anything else is returned as-is.
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_immortalize, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_immortalize, object.values())))
    elif isinstance(object, Set):
        return frozenset(map(_immortalize, object))
    else:
        return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The property reads "_{name}" on the instance and returns a copy for
    container types.

    Example
    - Given self._items, declare items = mirror("items") to expose it safely.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _immortalize(getattr(self, "_" + name))

    return property(getter)


def isempty(text, /):
    """
    Tell whether a piece of text carries nothing to render.

    None, Unset and zero-length strings are empty; whitespace is not.
    """
    return text is None or text is Unset or len(text) == 0


def filled(length, char, /):
    """
    Return a string made of `length` copies of `char` ("" when length <= 0).
    """
    if not isinstance(char, str) or len(char) != 1:
        raise TypeError("filled() second argument must be a single character")
    return char * max(length, 0)


def strip_hyphens(name, /):
    """
    Remove the leading "-" or "--" of an option name.

    Examples
    - strip_hyphens("--verbose") -> "verbose"
    - strip_hyphens("-v")        -> "v"
    - strip_hyphens("v")         -> "v"
    """
    if not isinstance(name, str):
        raise TypeError("strip_hyphens() argument must be a string")
    return re.sub(r"^--?", "", name)


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a valid, user-meaningful value but you still
need to distinguish “no input” from “explicitly passed None”.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "isempty",
    "filled",
    "strip_hyphens",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
