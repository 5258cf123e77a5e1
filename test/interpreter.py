"""
Interpreter tests (command-word dispatch, unknown commands, shell mode).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase
from unittest.mock import patch

from rich.console import Console

from rolodex import (
    Interpreter,
    interpret,
    Prefix,
    DeleteResolver,
    DeleteByName,
    DeleteByNameAndBooking,
    AddBooking,
    EditPerson,
    FindByCriteria,
    Name,
    UnknownCommandError,
    ZeroNumberError,
)
from rolodex import faults


class TestInterpreter(TestCase):

    def testDefaultCommands(self):
        self.assertEqual(Interpreter().commands, ("delete", "find", "add", "book", "edit"))

    def testDispatch(self):
        self.assertEqual(interpret("delete n/Alex Yeoh"), DeleteByName(Name("Alex Yeoh")))
        self.assertEqual(interpret("  delete n/Alex Yeoh b/1"), DeleteByNameAndBooking(Name("Alex Yeoh"), 1))
        self.assertIsInstance(interpret("find n/Alex"), FindByCriteria)
        self.assertIsInstance(interpret("book n/Alex d/2024-12-25 14:30 desc/Review"), AddBooking)
        self.assertIsInstance(interpret("edit 1 n/Amy"), EditPerson)

    def testTabAfterCommandWord(self):
        self.assertEqual(interpret("delete\tn/Alex"), DeleteByName(Name("Alex")))

    def testCommandWordIsCaseSensitive(self):
        with self.assertRaises(UnknownCommandError):
            interpret("DELETE n/Alex")

    def testUnknownCommandSuggests(self):
        with self.assertRaises(UnknownCommandError) as context:
            interpret("delte n/Alex")
        self.assertEqual(str(context.exception), "Unknown command")
        self.assertEqual(context.exception.hint, "did you mean 'delete'?")
        self.assertEqual(context.exception.options["value"], "delte")

    def testEmptyLine(self):
        with self.assertRaises(UnknownCommandError) as context:
            interpret("   ")
        self.assertEqual(context.exception.hint, "available commands: delete, find, add, book, edit")

    def testFailuresPropagate(self):
        with self.assertRaises(ZeroNumberError):
            interpret("delete n/Alex b/0")

    def testShellModeRendersAndReturnsNone(self):
        console = Console(record=True, width=120, color_system=None)
        with patch.object(faults, "console", console):
            self.assertIsNone(Interpreter(shell=True).resolve("delete n/Alex b/0"))
        self.assertIn("Booking ID cannot be 0!", console.export_text())

    def testCustomVocabulary(self):
        interpreter = Interpreter({"rm": DeleteResolver(name=Prefix("name:"))})
        self.assertEqual(interpreter.resolve("rm name:Alex"), DeleteByName(Name("Alex")))
        with self.assertRaises(UnknownCommandError):
            interpreter.resolve("delete n/Alex")

    def testFlagsAreReadOnly(self):
        interpreter = Interpreter(fancy=True)
        self.assertTrue(interpreter.fancy)
        self.assertFalse(interpreter.shell)
        with self.assertRaises(AttributeError):
            interpreter.shell = True

    def testInvalidTable(self):
        with self.assertRaises(TypeError):
            Interpreter({"rm": object()})
        with self.assertRaises(ValueError):
            Interpreter({"r m": DeleteResolver()})
        with self.assertRaises(TypeError):
            Interpreter([DeleteResolver()])


if __name__ == "__main__":
    unittest.main()
