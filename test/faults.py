"""
Fault tests (classification, options, rendering, trigger semantics).

Conventions
- Test method names follow CamelCase per project convention.
- Rendering is checked through a recording rich Console.
"""
import unittest
from unittest import TestCase
from unittest.mock import patch

from rich.console import Console

from rolodex import faults
from rolodex.faults import (
    FaultCode,
    ParseFailure,
    CardinalityError,
    FormatViolationError,
    NumericViolationError,
    MalformedNumberError,
    NumberTooLargeError,
    ZeroNumberError,
    MutualExclusionError,
    WhitespaceViolationError,
    UnknownCommandError,
    trigger,
    getdoc,
)


def render(fault):
    console = Console(record=True, width=120, color_system=None)
    console.print(fault)
    return console.export_text()


class TestFaultCode(TestCase):

    def testCodesAreGrouped(self):
        self.assertEqual(FaultCode.MISSING_VALUE // 1000, 21)
        self.assertEqual(FaultCode.INVALID_VALUE // 1000, 22)
        self.assertEqual(FaultCode.ZERO_NUMBER // 1000, 23)
        self.assertEqual(FaultCode.EXCLUSIVE_MODIFIERS // 1000, 24)
        self.assertEqual(FaultCode.SPACED_TOKEN // 1000, 25)
        self.assertEqual(FaultCode.UNKNOWN_COMMAND // 1000, 26)

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.ZERO_NUMBER.normalize(), "23003")

    def testNormalizeReadsHostCodes(self):
        main = __import__("__main__")
        with patch.object(main, "__codes__", {FaultCode.ZERO_NUMBER: "E-ZERO"}, create=True):
            self.assertEqual(FaultCode.ZERO_NUMBER.normalize(), "E-ZERO")


class TestParseFailure(TestCase):

    def testClassification(self):
        self.assertEqual(CardinalityError("x").code, FaultCode.MISSING_VALUE)
        self.assertEqual(FormatViolationError("x").code, FaultCode.INVALID_VALUE)
        self.assertEqual(MalformedNumberError("x").code, FaultCode.MALFORMED_NUMBER)
        self.assertEqual(NumberTooLargeError("x").code, FaultCode.NUMBER_TOO_LARGE)
        self.assertEqual(ZeroNumberError("x").code, FaultCode.ZERO_NUMBER)
        self.assertEqual(MutualExclusionError("x").code, FaultCode.EXCLUSIVE_MODIFIERS)
        self.assertEqual(WhitespaceViolationError("x").code, FaultCode.SPACED_TOKEN)
        self.assertEqual(UnknownCommandError("x").code, FaultCode.UNKNOWN_COMMAND)

    def testHierarchy(self):
        for kind in (MalformedNumberError, NumberTooLargeError, ZeroNumberError):
            self.assertTrue(issubclass(kind, NumericViolationError))
        self.assertTrue(issubclass(FormatViolationError, ValueError))
        self.assertTrue(issubclass(UnknownCommandError, ParseFailure))

    def testOptionsOverrideAndAreReadOnly(self):
        fault = CardinalityError("twice", code=FaultCode.REPEATED_VALUE, hint="once", prefix="n/")
        self.assertEqual(fault.code, FaultCode.REPEATED_VALUE)
        self.assertEqual(fault.hint, "once")
        self.assertEqual(fault.options["prefix"], "n/")
        with self.assertRaises(TypeError):
            fault.options["hint"] = "changed"

    def testMessageMustBeString(self):
        with self.assertRaises(TypeError):
            ParseFailure(None)

    def testReplaceKeepsTypeAndMessage(self):
        fault = ZeroNumberError("zero", hint="start at 1")
        replaced = fault.__replace__(shell=True)
        self.assertIs(type(replaced), ZeroNumberError)
        self.assertEqual(str(replaced), "zero")
        self.assertEqual(replaced.hint, "start at 1")
        self.assertTrue(replaced.options["shell"])
        self.assertNotIn("shell", fault.options)

    def testPlainRendering(self):
        text = render(MutualExclusionError("pick one", hint="drop b/"))
        self.assertIn("[ rolodex — 24001 | Conflicting Modifiers ]", text)
        self.assertIn("pick one", text)
        self.assertIn("→ drop b/", text)

    def testFancyRendering(self):
        text = render(CardinalityError("missing", fancy=True, prog="contacts"))
        self.assertIn("contacts", text)
        self.assertIn("missing", text)
        self.assertIn("╭", text)


class TestTrigger(TestCase):

    def testRaisesOutsideShell(self):
        with self.assertRaises(ZeroNumberError) as context:
            trigger(ZeroNumberError("zero"), hint="start at 1")
        self.assertEqual(context.exception.hint, "start at 1")

    def testPrintsInShell(self):
        console = Console(record=True, width=120, color_system=None)
        with patch.object(faults, "console", console):
            self.assertIsNone(trigger(ZeroNumberError("zero"), shell=True))
        self.assertIn("zero", console.export_text())

    def testRejectsNonTriggerables(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("plain"))


class TestGetdoc(TestCase):

    def testMissingDocs(self):
        self.assertIsNone(getdoc(FaultCode.BLANK_VALUE))

    def testHostDocs(self):
        main = __import__("__main__")
        docs = {FaultCode.BLANK_VALUE: """
            A prefix was given without a value.
            Write the value right after the prefix.
        """}
        with patch.object(main, "__docs__", docs, create=True):
            self.assertEqual(
                getdoc(FaultCode.BLANK_VALUE),
                "A prefix was given without a value.\nWrite the value right after the prefix.",
            )

    def testRejectsPlainInts(self):
        with self.assertRaises(TypeError):
            getdoc(21003)


if __name__ == "__main__":
    unittest.main()
