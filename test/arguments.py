"""
Arguments module behavioral tests (targets, flags, flag groups, positional slots).

Scope
- Validate Target kinds: defaults, requiredness, boolean/text writes, list identity.
- Validate Flag construction rules, name/letter matching and syntax fragments.
- Validate FlagGroup structure rules, lookup order and the validation algorithm.
- Validate Argument requiredness/variadic derivation and syntax.

Conventions
- Test method names follow CamelCase per project convention.
- Tests use the public API only (Target, Flag, FlagGroup, Argument, faults).
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from clitree import Target, TargetKind, Flag, FlagGroup, Argument
from clitree.faults import (
    FaultCode,
    InvalidBooleanValueError,
    MissingRequiredFlagsError,
    ExclusivityViolationError,
)


class TestTarget(TestCase):
    """Behavioral tests for Target storage slots."""

    def testInitialValues(self):
        self.assertIs(Target.bool().value, False)
        self.assertIsNone(Target.optional_bool().value)
        self.assertEqual(Target.text().value, "")
        self.assertIsNone(Target.optional_text().value)
        self.assertEqual(Target.text_list().value, [])

    def testRequiredDefaults(self):
        self.assertFalse(Target.bool().required)
        self.assertFalse(Target.optional_bool().required)
        self.assertTrue(Target.text().required)
        self.assertFalse(Target.optional_text().required)
        self.assertFalse(Target.text_list().required)

    def testRequiredOverride(self):
        self.assertTrue(Target.text_list(required=True).required)
        self.assertFalse(Target.text(required=False).required)

    def testKindFromString(self):
        self.assertIs(Target("optional-text").kind, TargetKind.OPTIONAL_TEXT)

    def testUnknownKindRejected(self):
        with self.assertRaises(ValueError):
            Target("number")

    def testValueMustMatchKind(self):
        with self.assertRaises(TypeError):
            Target.bool("yes")
        with self.assertRaises(TypeError):
            Target.text_list("a,b")
        with self.assertRaises(TypeError):
            Target.text_list([1, 2])

    def testRequiredMustBeBoolean(self):
        with self.assertRaises(TypeError):
            Target.text(required="yes")

    def testPredicates(self):
        self.assertTrue(Target.bool().is_bool())
        self.assertTrue(Target.optional_bool().is_bool())
        self.assertFalse(Target.text().is_bool())
        self.assertTrue(Target.text_list().is_vector())
        self.assertFalse(Target.text().is_vector())
        self.assertTrue(Target.optional_text().is_optional())
        self.assertFalse(Target.text().is_optional())

    def testBooleanLiterals(self):
        target = Target.bool()
        target.write_text("true")
        self.assertIs(target.value, True)
        target.write_text("false")
        self.assertIs(target.value, False)

    def testBooleanLiteralsAreCaseSensitive(self):
        target = Target.optional_bool()
        with self.assertRaises(InvalidBooleanValueError) as context:
            target.write_text("True")
        self.assertEqual(context.exception.code, FaultCode.INVALID_BOOLEAN_VALUE)
        self.assertIn("'True'", str(context.exception))
        self.assertIsNone(target.value)

    def testWriteBoolIsNoopForText(self):
        target = Target.text("keep")
        self.assertFalse(target.write_bool(True))
        self.assertEqual(target.value, "keep")

    def testWriteBoolStores(self):
        target = Target.optional_bool()
        self.assertTrue(target.write_bool(False))
        self.assertIs(target.value, False)

    def testTextOverwrites(self):
        target = Target.optional_text()
        target.write_text("a")
        target.write_text("b")
        self.assertEqual(target.value, "b")

    def testListAppendsIntoCallerList(self):
        storage = ["a"]
        target = Target.text_list(storage)
        target.write_text("b")
        self.assertIs(target.value, storage)
        self.assertEqual(storage, ["a", "b"])

    def testWriteTextRejectsNonStrings(self):
        with self.assertRaises(TypeError):
            Target.text().write_text(1)


class TestFlag(TestCase):
    """Behavioral tests for Flag construction and matching."""

    def testNameOrLetterRequired(self):
        with self.assertRaises(TypeError):
            Flag(Target.bool())

    def testNameWithDashesRejected(self):
        with self.assertRaises(ValueError):
            Flag(Target.bool(), "--verbose")

    def testInvalidNameRejected(self):
        with self.assertRaises(ValueError):
            Flag(Target.bool(), "no_color")

    def testInvalidLettersRejected(self):
        for letters in ("-", "=", " ", "vv"):
            with self.subTest(letters=letters), self.assertRaises(ValueError):
                Flag(Target.bool(), "", letters)

    def testTargetRequired(self):
        with self.assertRaises(TypeError):
            Flag(True, "verbose")

    def testSampleOnBooleanRejected(self):
        with self.assertRaises(ValueError):
            Flag(Target.bool(), "verbose", sample="X")

    def testDescrDefaultsToNone(self):
        self.assertIsNone(Flag(Target.bool(), "verbose").descr)

    def testDescrIsTrimmed(self):
        self.assertEqual(Flag(Target.bool(), "verbose", descr="  detailed  ").descr, "detailed")

    def testEmptyDescrRejected(self):
        with self.assertRaises(ValueError):
            Flag(Target.bool(), "verbose", descr="   ")

    def testNameMatch(self):
        flag = Flag(Target.bool(), "verbose", "vV")
        self.assertTrue(flag.name_match("verbose"))
        self.assertFalse(flag.name_match("v"))
        self.assertTrue(flag.name_match("v", as_letter=True))
        self.assertTrue(flag.name_match("V", as_letter=True))
        self.assertFalse(flag.name_match("verbose", as_letter=True))
        self.assertFalse(flag.name_match("vV", as_letter=True))

    def testLettersOnlyFlagNeverMatchesEmptyName(self):
        self.assertFalse(Flag(Target.bool(), "", "x").name_match(""))

    def testLabel(self):
        self.assertEqual(Flag(Target.bool(), "verbose", "v").label, "--verbose")
        self.assertEqual(Flag(Target.bool(), "", "xv").label, "-x")

    def testSpellings(self):
        self.assertEqual(Flag(Target.bool(), "help", "h?").spellings(), "--help -h -?")
        self.assertEqual(Flag(Target.bool(), "", "q").spellings(), "-q")

    def testSyntax(self):
        self.assertEqual(Flag(Target.bool(), "verbose", "v").syntax(), "[--verbose]")
        self.assertEqual(Flag(Target.text(), "name", sample="NAME").syntax(), "--name=<NAME>")
        self.assertEqual(Flag(Target.optional_text(), "", "o").syntax(), "[-o=<value>]")
        self.assertEqual(Flag(Target.text_list(), "include", "I", sample="DIR").syntax(), "[--include=<DIR>...]")
        self.assertEqual(Flag(Target.bool(required=True), "force").syntax(), "--force")

    def testUsedAsResets(self):
        flag = Flag(Target.bool(), "verbose")
        self.assertEqual(flag.used_as, "")
        flag.used_as = "--verbose"
        flag.reset()
        self.assertEqual(flag.used_as, "")

    def testRepr(self):
        self.assertTrue(repr(Flag(Target.bool(), "verbose")).startswith("flag("))


class TestFlagGroup(TestCase):
    """Behavioral tests for FlagGroup structure and validation."""

    def testAddReturnsItem(self):
        group = FlagGroup()
        flag = Flag(Target.bool(), "verbose")
        self.assertIs(group.add(flag), flag)
        self.assertEqual(group.items, [flag])

    def testAddRejectsOtherTypes(self):
        with self.assertRaises(TypeError):
            FlagGroup().add("--verbose")

    def testGroupCannotContainItself(self):
        group = FlagGroup()
        with self.assertRaises(ValueError):
            group.add(group)

    def testGroupCannotContainAnEnclosingGroup(self):
        outer = FlagGroup()
        inner = outer.add(FlagGroup())
        with self.assertRaises(ValueError):
            inner.add(outer)

    def testNodesAreNotShared(self):
        flag = Flag(Target.bool(), "verbose")
        FlagGroup(flag)
        with self.assertRaises(ValueError):
            FlagGroup().add(flag)

    def testNameClashRejected(self):
        group = FlagGroup(Flag(Target.bool(), "verbose"))
        with self.assertRaises(ValueError):
            group.add(Flag(Target.bool(), "verbose"))

    def testLetterClashAcrossNestingRejected(self):
        group = FlagGroup(Flag(Target.bool(), "all", "x"))
        inner = group.add(FlagGroup())
        with self.assertRaises(ValueError):
            inner.add(Flag(Target.bool(), "extra", "x"))

    def testFindIsDepthFirst(self):
        first = Flag(Target.bool(), "alpha", "a")
        nested = Flag(Target.bool(), "beta", "b")
        last = Flag(Target.bool(), "gamma", "g")
        group = FlagGroup(first, FlagGroup(nested), last)
        self.assertIs(group.find("beta"), nested)
        self.assertIs(group.find("g", as_letter=True), last)
        self.assertIsNone(group.find("delta"))
        self.assertEqual(list(group.flags()), [first, nested, last])

    def testExclusiveValidation(self):
        json = Flag(Target.bool(), "json")
        yaml = Flag(Target.bool(), "yaml")
        group = FlagGroup(json, yaml, exclusive=True)
        self.assertFalse(group.validate())
        json.used_as = "--json"
        self.assertTrue(group.validate())
        yaml.used_as = "--yaml"
        with self.assertRaises(ExclusivityViolationError) as context:
            group.validate()
        self.assertEqual(context.exception.options["flags"], ("--json", "--yaml"))

    def testNestedUsedGroupCountsForExclusivity(self):
        alone = Flag(Target.bool(), "alone")
        nested = Flag(Target.bool(), "nested")
        group = FlagGroup(alone, FlagGroup(nested), exclusive=True)
        alone.used_as = "--alone"
        nested.used_as = "--nested"
        with self.assertRaises(ExclusivityViolationError):
            group.validate()

    def testRequiredGroupNeedsOneItem(self):
        group = FlagGroup(Flag(Target.bool(), "json"), Flag(Target.bool(), "yaml"), required=True)
        with self.assertRaises(MissingRequiredFlagsError) as context:
            group.validate()
        self.assertIn("at least one of", str(context.exception))

    def testEmptyRequiredGroupValidates(self):
        self.assertFalse(FlagGroup(required=True).validate())

    def testSingleUnusedRequiredFlagRaises(self):
        group = FlagGroup(Flag(Target.text(), "token"), Flag(Target.bool(), "verbose"))
        with self.assertRaises(MissingRequiredFlagsError) as context:
            group.validate()
        self.assertIn("'--token'", str(context.exception))

    def testAllUnusedRequiredFlagsListed(self):
        group = FlagGroup(Flag(Target.text(), "user"), Flag(Target.text(), "", "p"))
        with self.assertRaises(MissingRequiredFlagsError) as context:
            group.validate()
        self.assertEqual(context.exception.options["flags"], ("--user", "-p"))

    def testResetClearsTree(self):
        nested = Flag(Target.bool(), "nested")
        group = FlagGroup(FlagGroup(nested))
        nested.used_as = "--nested"
        group.reset()
        self.assertEqual(nested.used_as, "")

    def testSyntax(self):
        exclusive = FlagGroup(Flag(Target.bool(), "json"), Flag(Target.bool(), "yaml"), exclusive=True)
        self.assertEqual(exclusive.syntax(), "[--json] | [--yaml]")
        group = FlagGroup(Flag(Target.bool(), "verbose", "v"))
        group.add(exclusive)
        self.assertEqual(group.syntax(), "[--verbose] ([--json] | [--yaml])")
        self.assertEqual(FlagGroup().syntax(), "")

    def testNestedGroupInExclusiveGroupIsParenthesized(self):
        plain = FlagGroup(Flag(Target.bool(), "brief"), Flag(Target.bool(), "color"))
        exclusive = FlagGroup(Flag(Target.bool(), "json"), plain, exclusive=True)
        self.assertEqual(exclusive.syntax(), "[--json] | ([--brief] [--color])")
        self.assertEqual(FlagGroup(FlagGroup(Flag(Target.bool(), "dry"), Flag(Target.bool(), "wet"))).syntax(),
                         "[--dry] [--wet]")


class TestArgument(TestCase):
    """Behavioral tests for positional Argument slots."""

    def testBooleanTargetRejected(self):
        with self.assertRaises(TypeError):
            Argument(Target.bool(), "FLAG")

    def testNameRules(self):
        with self.assertRaises(ValueError):
            Argument(Target.text(), "  ")
        with self.assertRaises(ValueError):
            Argument(Target.text(), "TWO WORDS")

    def testRequiredness(self):
        self.assertTrue(Argument(Target.text(), "A").required)
        self.assertFalse(Argument(Target.optional_text(), "B").required)
        self.assertFalse(Argument(Target.text_list(), "C").required)
        self.assertTrue(Argument(Target.text_list(required=True), "D").required)

    def testVariadic(self):
        self.assertTrue(Argument(Target.text_list(), "FILES").variadic)
        self.assertFalse(Argument(Target.text(), "FILE").variadic)

    def testSyntax(self):
        self.assertEqual(Argument(Target.text(), "FILE").syntax(), "FILE")
        self.assertEqual(Argument(Target.optional_text(), "OUT").syntax(), "[OUT]")
        self.assertEqual(Argument(Target.text_list(required=True), "FILES").syntax(), "FILES...")
        self.assertEqual(Argument(Target.text_list(), "FILES").syntax(), "[FILES...]")


if __name__ == "__main__":
    unittest.main()
