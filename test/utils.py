"""
Utilities module behavioral tests.

Scope
- Validate the Unset sentinel (singleton, falsey, sealed) and coalesce().
- Validate rename()/mirror() metadata helpers.
- Validate text helpers used by the writers (isempty, filled, strip_hyphens).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from helpwright.utils import *


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsey(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testFinalClass(self):
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testCoalesceReplacesOnlyUnset(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertIsNone(coalesce(Unset))


class TestMetadataHelpers(TestCase):
    """Behavioral tests for rename() and mirror()."""

    def testRenameFunctionForm(self):
        def f():
            pass

        self.assertIs(rename(f, "work"), f)
        self.assertEqual((f.__name__, f.__qualname__), ("work", "work"))

    def testRenameDecoratorForm(self):
        @rename("work")
        def f():
            pass

        self.assertEqual(f.__name__, "work")

    def testRenameWrongArity(self):
        with self.assertRaises(TypeError):
            rename()

    def testMirrorIsReadOnlyCopy(self):
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = ["a", "b"]

        holder = Holder()
        self.assertEqual(holder.items, ("a", "b"))
        with self.assertRaises(AttributeError):
            holder.items = ()
        self.assertEqual(holder._items, ["a", "b"])


class TestTextHelpers(TestCase):
    """Behavioral tests for the text helpers."""

    def testIsEmpty(self):
        self.assertTrue(isempty(None))
        self.assertTrue(isempty(Unset))
        self.assertTrue(isempty(""))
        self.assertFalse(isempty(" "))
        self.assertFalse(isempty("text"))

    def testFilled(self):
        self.assertEqual(filled(4, "-"), "----")
        self.assertEqual(filled(0, "-"), "")
        self.assertEqual(filled(-2, "-"), "")

    def testFilledRequiresSingleCharacter(self):
        with self.assertRaises(TypeError):
            filled(3, "--")

    def testStripHyphens(self):
        self.assertEqual(strip_hyphens("--verbose"), "verbose")
        self.assertEqual(strip_hyphens("-v"), "v")
        self.assertEqual(strip_hyphens("v"), "v")
        self.assertEqual(strip_hyphens("---x"), "-x")


if __name__ == "__main__":
    unittest.main()
