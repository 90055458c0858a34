"""
Names module behavioral tests (naming elements and specifications).

Scope
- Validate spelling of short/long/custom elements for a key.
- Validate specification ordering, duplicate handling, value semantics and presets.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from charter import Name, NameKind, NameSpecification


class TestName(TestCase):
    """Behavioral tests for naming elements."""

    def testShortUsesFirstCharacter(self):
        self.assertEqual(Name.short.spell("help"), "-h")

    def testLongUsesHyphenatedKey(self):
        self.assertEqual(Name.long.spell("help"), "--help")
        self.assertEqual(Name.long.spell("dryRun"), "--dry-run")

    def testCustomShort(self):
        name = Name.custom_short("?", allowing_joined=True)
        self.assertEqual(name.spell("help"), "-?")
        self.assertTrue(name.allowing_joined)
        self.assertFalse(name.with_single_dash)

    def testCustomLong(self):
        self.assertEqual(Name.custom_long("usage").spell("help"), "--usage")
        self.assertEqual(Name.custom_long("help", with_single_dash=True).spell("help"), "-help")

    def testCustomShortRejectsBadCharacters(self):
        for char in ("", "ab", " ", "-"):
            with self.assertRaises(TypeError):
                Name.custom_short(char)

    def testCustomLongRejectsEmpty(self):
        with self.assertRaises(TypeError):
            Name.custom_long("  ")

    def testValueEquality(self):
        self.assertEqual(Name.custom_long("x"), Name.custom_long("x"))
        self.assertNotEqual(Name.custom_long("x"), Name.custom_long("x", with_single_dash=True))
        self.assertEqual(hash(Name.custom_short("q")), hash(Name.custom_short("q")))
        self.assertIs(Name.short.kind, NameKind.SHORT)

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            Name.short.value = "x"


class TestNameSpecification(TestCase):
    """Behavioral tests for name specifications."""

    def testShortAndLongPreset(self):
        self.assertEqual(NameSpecification.short_and_long.names_for("help"), ("-h", "--help"))

    def testOrderFollowsElements(self):
        spec = NameSpecification(Name.long, Name.custom_short("?"))
        self.assertEqual(spec.names_for("help"), ("--help", "-?"))

    def testDuplicatesCollapse(self):
        spec = NameSpecification(Name.long, Name.long, Name.short)
        self.assertEqual(spec.elements, (Name.long, Name.short))
        self.assertEqual(len(spec), 2)

    def testRepeatedSpellingsCollapse(self):
        spec = NameSpecification(Name.long, Name.custom_long("help"))
        self.assertEqual(spec.names_for("help"), ("--help",))

    def testEmptySpecification(self):
        spec = NameSpecification()
        self.assertFalse(spec)
        self.assertEqual(spec.names_for("help"), ())

    def testValueEquality(self):
        self.assertEqual(NameSpecification(Name.short, Name.long), NameSpecification.short_and_long)
        self.assertNotEqual(NameSpecification(Name.long, Name.short), NameSpecification.short_and_long)
        self.assertEqual(hash(NameSpecification(Name.long)), hash(NameSpecification.long))

    def testRejectsNonNames(self):
        with self.assertRaises(TypeError):
            NameSpecification("--help")

    def testNamesForRejectsEmptyKey(self):
        with self.assertRaises(TypeError):
            NameSpecification.long.names_for("")

    def testRepr(self):
        self.assertEqual(repr(NameSpecification.short_and_long), "NameSpecification(Name.short, Name.long)")


if __name__ == "__main__":
    unittest.main()
