import dataclasses
import unittest

from optpy import Option, Some, Nothing, NONE, none, Panic


class TestOption(unittest.TestCase):
    def test_absent_is_valid(self):
        ov = none(int)
        self.assertTrue(ov.is_none())
        self.assertFalse(ov.is_some())
        with self.assertRaises(Panic):
            ov.unwrap()
        self.assertEqual(ov.unwrap_or(5), 5)

    def test_present(self):
        ov = Some(5)
        self.assertFalse(ov.is_none())
        self.assertTrue(ov.is_some())
        self.assertEqual(ov.unwrap(), 5)
        self.assertEqual(ov.unwrap_or(1), 5)
        self.assertTrue(isinstance(ov, Option))

    def test_unwrap_returns_value_unchanged(self):
        payload = {"k": [1, 2]}
        self.assertIs(Some(payload).unwrap(), payload)

    def test_unwrap_or_zero(self):
        self.assertEqual(Some(5).unwrap_or_zero(), 5)
        self.assertEqual(none(int).unwrap_or_zero(), 0)
        self.assertEqual(none(str).unwrap_or_zero(), "")
        self.assertIsNone(NONE.unwrap_or_zero())

    def test_try_unwrap(self):
        x, xok = Some(5).try_unwrap()
        self.assertTrue(xok)
        self.assertEqual(x, 5)

        y, yok = none(int).try_unwrap()
        self.assertFalse(yok)
        self.assertEqual(y, 0)

    def test_present_falsy_values_are_still_present(self):
        for v in (0, "", False, None, []):
            self.assertTrue(Some(v).is_some())
            self.assertEqual(Some(v).unwrap_or("fallback"), v)


class TestPanic(unittest.TestCase):
    def test_message_names_element_type(self):
        with self.assertRaises(Panic) as cm:
            none(int).unwrap()
        self.assertEqual(str(cm.exception), "Option[int].unwrap: no value to unwrap")
        with self.assertRaises(Panic) as cm2:
            NONE.unwrap()
        self.assertEqual(str(cm2.exception), "Option.unwrap: no value to unwrap")

    def test_not_swallowed_by_exception_handlers(self):
        def careless():
            try:
                return NONE.unwrap()
            except Exception:
                return "swallowed"

        with self.assertRaises(Panic):
            careless()


class TestValueSemantics(unittest.TestCase):
    def test_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            Some(1).value = 2  # type: ignore[misc]
        with self.assertRaises(dataclasses.FrozenInstanceError):
            none(int).type_ = str  # type: ignore[misc]

    def test_equality_and_hash(self):
        self.assertEqual(Some(1), Some(1))
        self.assertNotEqual(Some(1), Some(2))
        self.assertNotEqual(Some(1), NONE)
        self.assertEqual(NONE, none(int))
        self.assertEqual(none(str), Nothing(int))
        self.assertEqual(len({Some(1), Some(1), NONE, none(int)}), 2)

    def test_repr(self):
        self.assertEqual(repr(Some(1)), "Some(value=1)")
        self.assertEqual(repr(NONE), "Nothing")
        self.assertEqual(repr(none(int)), "Nothing[int]")

    def test_none_without_type_is_singleton(self):
        self.assertIs(none(), NONE)


class TestOptionMethods(unittest.TestCase):
    def test_map(self):
        self.assertEqual(Some(2).map(lambda x: x + 1).value, 3)
        self.assertTrue(NONE.map(lambda x: x + 1).is_none())

    def test_flat_map(self):
        self.assertEqual(Some(2).flat_map(lambda x: Some(x * 3)), Some(6))
        self.assertTrue(Some(2).flat_map(lambda x: NONE).is_none())
        self.assertTrue(none(int).flat_map(lambda x: Some(x)).is_none())

    def test_get_or_else_and_to_nullable(self):
        self.assertEqual(Some(1).get_or_else(5), 1)
        self.assertEqual(NONE.get_or_else(5), 5)
        self.assertEqual(Some("a").to_nullable(), "a")
        self.assertIsNone(none(str).to_nullable())
