"""
Formatting module behavioral tests (per-option rendering).

Scope
- Validate OptionFormatter names, argument names, descriptions and "since".
- Validate syntax fragments with optional/required bracketing.
- Validate FormatterBuilder customization.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from helpwright import Option, FormatterBuilder, OptionFormatter


class TestOptionFormatter(TestCase):
    """Behavioral tests for OptionFormatter with default decorations."""

    def setUp(self):
        self.builder = FormatterBuilder()

    def testBuildReturnsFormatter(self):
        option = Option("v")
        formatter = self.builder.build(option)
        self.assertIsInstance(formatter, OptionFormatter)
        self.assertIs(formatter.option, option)

    def testBuildRejectsNonOptions(self):
        with self.assertRaises(TypeError):
            self.builder.build("v")

    def testNames(self):
        formatter = self.builder.build(Option("v", "verbose"))
        self.assertEqual(formatter.opt, "-v")
        self.assertEqual(formatter.long_opt, "--verbose")
        self.assertEqual(formatter.both_opt, "-v, --verbose")

    def testBothOptWithSingleName(self):
        self.assertEqual(self.builder.build(Option("v")).both_opt, "-v")
        self.assertEqual(self.builder.build(Option(long_opt="verbose")).both_opt, "--verbose")

    def testArgName(self):
        self.assertEqual(self.builder.build(Option("f", arg_name="FILE")).arg_name, "<FILE>")
        self.assertEqual(self.builder.build(Option("f", argument=True)).arg_name, "<arg>")
        self.assertEqual(self.builder.build(Option("f")).arg_name, "")

    def testDescription(self):
        self.assertEqual(self.builder.build(Option("v", descr="talk")).description, "talk")
        self.assertEqual(self.builder.build(Option("v")).description, "")

    def testDeprecatedDescription(self):
        formatter = self.builder.build(Option("v", descr="talk", deprecated=True))
        self.assertEqual(formatter.description, "[Deprecated] talk")

    def testSince(self):
        self.assertEqual(self.builder.build(Option("v", since="1.4")).since, "1.4")
        self.assertEqual(self.builder.build(Option("v")).since, "--")

    def testSyntaxOptionFollowsOptionRequired(self):
        self.assertEqual(self.builder.build(Option("a")).to_syntax_option(), "[-a]")
        self.assertEqual(self.builder.build(Option("a", required=True)).to_syntax_option(), "-a")

    def testSyntaxOptionExplicitRequired(self):
        formatter = self.builder.build(Option("a"))
        self.assertEqual(formatter.to_syntax_option(True), "-a")
        self.assertEqual(self.builder.build(Option("a", required=True)).to_syntax_option(False), "[-a]")

    def testSyntaxOptionWithArgument(self):
        formatter = self.builder.build(Option("f", "file", arg_name="FILE"))
        self.assertEqual(formatter.to_syntax_option(), "[-f <FILE>]")
        self.assertEqual(formatter.to_syntax_option(True), "-f <FILE>")

    def testSyntaxOptionLongOnly(self):
        self.assertEqual(self.builder.build(Option(long_opt="legacy")).to_syntax_option(), "[--legacy]")

    def testToOptional(self):
        formatter = self.builder.build(Option("a"))
        self.assertEqual(formatter.to_optional("x"), "[x]")
        self.assertEqual(formatter.to_optional(""), "")


class TestFormatterBuilder(TestCase):
    """Behavioral tests for FormatterBuilder customization."""

    def testToArgName(self):
        builder = FormatterBuilder()
        self.assertEqual(builder.to_arg_name("file"), "<file>")
        self.assertEqual(builder.to_arg_name(""), "<arg>")
        self.assertEqual(builder.to_arg_name(None), "<arg>")

    def testCustomDecorations(self):
        builder = FormatterBuilder(
            opt_prefix="/",
            long_opt_prefix="/",
            opt_arg_separator=":",
            opt_separator=" or ",
            arg_delimiters=("{", "}"),
            optional_delimiters=("(", ")"),
            default_arg_name="value",
        )
        formatter = builder.build(Option("o", "out", argument=True))
        self.assertEqual(formatter.both_opt, "/o or /out")
        self.assertEqual(formatter.to_syntax_option(), "(/o:{value})")

    def testCustomDeprecatedFormat(self):
        builder = FormatterBuilder(deprecated_format=lambda option: "OLD " + option.key)
        self.assertEqual(builder.build(Option("v", deprecated=True)).description, "OLD v")

    def testRejectsBadSettings(self):
        with self.assertRaises(TypeError):
            FormatterBuilder(opt_prefix=1)
        with self.assertRaises(TypeError):
            FormatterBuilder(arg_delimiters=("<",))
        with self.assertRaises(TypeError):
            FormatterBuilder(deprecated_format="[Deprecated]")

    def testSettingsAreReadOnly(self):
        builder = FormatterBuilder()
        self.assertEqual(builder.optional_delimiters, ("[", "]"))
        with self.assertRaises(AttributeError):
            builder.opt_prefix = "+"


if __name__ == "__main__":
    unittest.main()
