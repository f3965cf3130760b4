"""
Escaping module behavioral tests.

Scope
- Validate the APT escape table (five reserved characters, nothing else).
- Validate longest-match substitution and the identity table.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from helpwright.escaping import LookupTranslator, ESCAPE_APT, ESCAPE_NONE


class TestAptEscaping(TestCase):
    """Behavioral tests for ESCAPE_APT."""

    def testReservedCharacters(self):
        self.assertEqual(ESCAPE_APT.translate("\\"), "\\\\")
        self.assertEqual(ESCAPE_APT.translate("\""), "\\\"")
        self.assertEqual(ESCAPE_APT.translate("*"), "\\*")
        self.assertEqual(ESCAPE_APT.translate("+"), "\\+")
        self.assertEqual(ESCAPE_APT.translate("|"), "\\|")

    def testMixedText(self):
        self.assertEqual(ESCAPE_APT.translate('say "a|b" * 2 + c'), 'say \\"a\\|b\\" \\* 2 \\+ c')

    def testOtherCharactersUnchanged(self):
        text = "plain text with [brackets], <angles> & dashes --"
        self.assertEqual(ESCAPE_APT.translate(text), text)

    def testEscapedBackslashIsNotRescanned(self):
        self.assertEqual(ESCAPE_APT.translate("\\*"), "\\\\\\*")

    def testEmptyInputs(self):
        self.assertEqual(ESCAPE_APT.translate(""), "")
        self.assertEqual(ESCAPE_APT.translate(None), "")


class TestLookupTranslator(TestCase):
    """Behavioral tests for LookupTranslator."""

    def testLongestMatchWins(self):
        translator = LookupTranslator({"a": "1", "ab": "2"})
        self.assertEqual(translator.translate("abab a"), "22 1")

    def testIdentityTable(self):
        self.assertEqual(ESCAPE_NONE.translate("*|+"), "*|+")

    def testCallable(self):
        self.assertEqual(ESCAPE_APT("|"), "\\|")

    def testRejectsEmptyKeys(self):
        with self.assertRaises(ValueError):
            LookupTranslator({"": "x"})

    def testRejectsNonMapping(self):
        with self.assertRaises(TypeError):
            LookupTranslator([("a", "b")])

    def testLookupIsReadOnly(self):
        with self.assertRaises(TypeError):
            ESCAPE_APT.lookup["x"] = "y"


if __name__ == "__main__":
    unittest.main()
