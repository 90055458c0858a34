"""
Commands module behavioral tests (command types and configuration consumers).

Scope
- Validate command name derivation and the configuration capability check.
- Validate the read-only consumers: usage policy, version flags, help name
  inheritance, displayed subcommands, default subcommand lookup, tree walking.

Conventions
- Test method names follow CamelCase per project convention.
- Command types are declared at module level, the way applications declare them.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from charter import (
    CommandConfiguration,
    Name,
    NameSpecification,
    ParsableCommand,
    Usage,
    command_name,
    configuration_of,
    default_subcommand,
    displayed_subcommands,
    help_names,
    usage_of,
    version_flags,
    walk,
)


class Add(ParsableCommand):
    configuration = CommandConfiguration(abstract="Print the sum of the values.")


class Multiply(ParsableCommand):
    configuration = CommandConfiguration(abstract="Print the product of the values.")


class Hidden(ParsableCommand):
    configuration = CommandConfiguration(should_display=False, help_names=NameSpecification())


class StandardDeviation(ParsableCommand):
    configuration = CommandConfiguration(command_name="stdev")


class Statistics(ParsableCommand):
    configuration = CommandConfiguration(
        command_name="stats",
        subcommands=[StandardDeviation],
        help_names=NameSpecification(Name.long, Name.custom_short("?")),
    )


class Math(ParsableCommand):
    configuration = CommandConfiguration(
        abstract="A utility for performing maths.",
        version="1.0.0",
        subcommands=[Multiply, Add, Hidden, Statistics],
        default_subcommand=Add,
    )


class HTTPServer(ParsableCommand):
    pass


class Echo(ParsableCommand):
    def run(self):
        return "echo"


class Plain:
    configuration = CommandConfiguration(usage="")


class TestCommandNames(TestCase):
    """Behavioral tests for command naming."""

    def testDerivedName(self):
        self.assertEqual(Math.command_name(), "math")
        self.assertEqual(HTTPServer.command_name(), "http-server")

    def testConfiguredName(self):
        self.assertEqual(StandardDeviation.command_name(), "stdev")

    def testPlainTypeWithConfiguration(self):
        self.assertEqual(command_name(Plain), "plain")
        self.assertEqual(command_name(Statistics), "stats")

    def testInheritedConfiguration(self):
        self.assertEqual(HTTPServer.configuration, CommandConfiguration())

    def testConfigurationMustBeConfiguration(self):
        with self.assertRaises(TypeError):
            class Broken(ParsableCommand):
                configuration = {"abstract": "nope"}

    def testConfigurationOfRejectsNonCommands(self):
        with self.assertRaises(TypeError):
            configuration_of(object)
        with self.assertRaises(TypeError):
            configuration_of(Echo())

    def testRunIsAbstract(self):
        self.assertIn("run", ParsableCommand.__abstractmethods__)
        with self.assertRaises(TypeError):
            Math()

    def testConcreteCommandRuns(self):
        self.assertEqual(Echo().run(), "echo")
        self.assertEqual(Echo.command_name(), "echo")


class TestConsumers(TestCase):
    """Behavioral tests for the read-only configuration consumers."""

    def testUsagePolicy(self):
        self.assertIs(usage_of(Math), Usage.AUTO)
        self.assertIs(usage_of(Plain), Usage.SUPPRESSED)

    def testVersionFlags(self):
        self.assertEqual(version_flags(Math), ("--version",))
        self.assertEqual(version_flags(Add), ())

    def testHelpNamesRootFallback(self):
        self.assertEqual(help_names(Math), ("-h", "--help"))
        self.assertEqual(help_names(Math, Add), ("-h", "--help"))

    def testHelpNamesOwnValue(self):
        self.assertEqual(help_names(Math, Statistics), ("--help", "-?"))

    def testHelpNamesInheritedFromAncestor(self):
        self.assertEqual(help_names(Math, Statistics, StandardDeviation), ("--help", "-?"))

    def testHelpNamesExplicitlyEmpty(self):
        self.assertEqual(help_names(Math, Hidden), ())

    def testDisplayedSubcommandsKeepOrder(self):
        self.assertEqual(displayed_subcommands(Math), [Multiply, Add, Statistics])
        self.assertEqual(configuration_of(Math).subcommands, [Multiply, Add, Hidden, Statistics])

    def testDefaultSubcommand(self):
        self.assertIs(default_subcommand(Math), Add)
        self.assertIsNone(default_subcommand(Add))

    def testDefaultSubcommandOutsideSubcommands(self):
        class Orphaned(ParsableCommand):
            configuration = CommandConfiguration(subcommands=[Add], default_subcommand=Multiply)

        self.assertIs(Orphaned.configuration.default_subcommand, Multiply)
        self.assertIsNone(default_subcommand(Orphaned))

    def testWalk(self):
        paths = [" ".join(map(command_name, path)) for path in walk(Math)]
        self.assertEqual(paths, [
            "math",
            "math multiply",
            "math add",
            "math hidden",
            "math stats",
            "math stats stdev",
        ])

    def testWalkSkipsCycles(self):
        class Loop(ParsableCommand):
            pass

        Loop.configuration = CommandConfiguration(subcommands=[Loop, Add])
        self.assertEqual(list(walk(Loop)), [(Loop,), (Loop, Add)])


if __name__ == "__main__":
    unittest.main()
