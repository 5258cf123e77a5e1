"""
Tests for the internal helpers (Unset sentinel, nullify, rename, Sealed, view).

Conventions
- Test method names follow CamelCase per project convention.
"""
import copy
import unittest
from types import MappingProxyType
from unittest import TestCase

from rolodex.utils import Unset, UnsetType, nullify, rename, Sealed, view


class Box(Sealed):
    items = view("items")
    table = view("table")
    label = view("label")

    def __new__(cls, items, table, label):
        with super().__new__(cls) as self:
            setattr(self, "-items", items)
            setattr(self, "-table", table)
            setattr(self, "-label", label)
        return self


class TestUnset(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)

    def testFalsyAndRepr(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")
        self.assertNotEqual(Unset, None)

    def testFinal(self):
        with self.assertRaises(TypeError):
            class Other(UnsetType):  # NOQA: F-841
                pass

    def testUnionWithTypes(self):
        self.assertEqual(Unset | int, UnsetType | int)


class TestHelpers(TestCase):

    def testNullify(self):
        self.assertIsNone(nullify(Unset))
        self.assertEqual(nullify(Unset, 3), 3)
        self.assertEqual(nullify(0, 3), 0)
        self.assertIsNone(nullify(None, 3))

    def testRename(self):
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")

        @rename("curried")
        def other():
            pass

        self.assertEqual(other.__qualname__, "curried")

    def testRenameRequiresString(self):
        with self.assertRaises(TypeError):
            rename(lambda: None, 1)


class TestSealed(TestCase):

    def testViewsAreImmutable(self):
        box = Box([1, 2], {"a": 1}, "label")
        self.assertEqual(box.items, (1, 2))
        self.assertIsInstance(box.table, MappingProxyType)
        self.assertEqual(box.label, "label")

    def testWritesAfterBuildRefused(self):
        box = Box([], {}, "label")
        with self.assertRaises(AttributeError):
            box.label = "other"
        with self.assertRaises(AttributeError):
            setattr(box, "-label", "other")
        with self.assertRaises(AttributeError):
            del box.label

    def testBackingFieldsHidden(self):
        box = Box([], {}, "label")
        with self.assertRaises(AttributeError):
            getattr(box, "-label")


if __name__ == "__main__":
    unittest.main()
