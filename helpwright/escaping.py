"""
Dialect escaping.

A LookupTranslator holds a fixed table of literal → replacement pairs and
rewrites text in a single left-to-right scan. At each position the longest
matching literal wins; characters that match nothing are copied unchanged.

Tables
- ESCAPE_APT: backslash, double-quote, asterisk, plus and pipe, each mapped
  to its backslash-prefixed form.
- ESCAPE_NONE: empty table (identity), used by the plain text dialect.

Example
    >>> ESCAPE_APT.translate('a*b|c')
    'a\\\\*b\\\\|c'
"""
import re
from collections.abc import Mapping
from types import MappingProxyType

from .utils import Unset


class LookupTranslator:
    """
    Longest-match substitution over a fixed lookup table.
    """

    __slots__ = ("_lookup", "_pattern")

    def __init__(self, lookup, /):
        if not isinstance(lookup, Mapping):
            raise TypeError("translator lookup must be a mapping")
        for key, value in lookup.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError("translator lookup must map strings to strings")
            if not key:
                raise ValueError("translator lookup keys cannot be empty")
        self._lookup = MappingProxyType(dict(lookup))
        # Alternatives are tried in order, so longer literals go first.
        if self._lookup:
            self._pattern = re.compile("|".join(map(re.escape, sorted(self._lookup, key=len, reverse=True))))
        else:
            self._pattern = None

    @property
    def lookup(self):
        return self._lookup

    def translate(self, text, /):
        """
        Return `text` with every table literal replaced ("" for None/Unset).
        """
        if text is None or text is Unset:
            return ""
        text = str(text)
        if self._pattern is None:
            return text
        return self._pattern.sub(lambda match: self._lookup[match.group()], text)

    def __call__(self, text, /):
        return self.translate(text)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, dict(self._lookup))


ESCAPE_APT = LookupTranslator({
    "\\": "\\\\",
    "\"": "\\\"",
    "*": "\\*",
    "+": "\\+",
    "|": "\\|",
})

ESCAPE_NONE = LookupTranslator({})


__all__ = (
    "LookupTranslator",
    "ESCAPE_APT",
    "ESCAPE_NONE",
)
