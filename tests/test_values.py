import unittest

from rill import primitive
from rill.primitive import UNIT, MIN_INT, MAX_INT, apply_binary, apply_unary, kind_of
from rill.faults import DivisionByZero, TypeMismatch

class ValueModelTests(unittest.TestCase):

	def test_kinds(self):
		self.assertEqual(primitive.INTEGER, kind_of(3))
		self.assertEqual(primitive.FLAG, kind_of(True))
		self.assertEqual(primitive.NO_VALUE, kind_of(UNIT))
		self.assertEqual("()", repr(UNIT))

	def test_arithmetic(self):
		for glyph, a, b, expect in [
			("+", 2, 3, 5),
			("-", 2, 3, -1),
			("*", -4, 3, -12),
			("/", 7, 2, 3),
			("/", -7, 2, -3),
			("/", 7, -2, -3),
			("%", 7, 2, 1),
			("%", -7, 2, -1),
			("%", 7, -2, 1),
		]:
			with self.subTest(glyph=glyph, a=a, b=b):
				self.assertEqual(expect, apply_binary(glyph, a, b))

	def test_wraps_like_a_machine_word(self):
		self.assertEqual(MIN_INT, apply_binary("+", MAX_INT, 1))
		self.assertEqual(MAX_INT, apply_binary("-", MIN_INT, 1))
		self.assertEqual(MIN_INT, apply_binary("/", MIN_INT, -1))
		self.assertEqual(0, apply_binary("%", MIN_INT, -1))
		self.assertEqual(MIN_INT, apply_unary("-", MIN_INT))

	def test_comparisons_give_flags(self):
		for glyph, expect in [("<", True), ("<=", True), (">", False), (">=", False), ("==", False), ("!=", True)]:
			with self.subTest(glyph):
				self.assertIs(expect, apply_binary(glyph, 1, 2))

	def test_division_by_zero(self):
		with self.assertRaises(DivisionByZero):
			apply_binary("/", 1, 0)
		with self.assertRaises(DivisionByZero) as cm:
			apply_binary("%", 1, 0)
		self.assertEqual("%", cm.exception.glyph)

	def test_flags_are_not_integers(self):
		with self.assertRaises(TypeMismatch) as cm:
			apply_binary("+", True, 1)
		self.assertEqual(("integer", "flag"), (cm.exception.expected, cm.exception.found))
		with self.assertRaises(TypeMismatch):
			apply_binary("==", 1, True)
		with self.assertRaises(TypeMismatch):
			apply_unary("!", 0)
		self.assertIs(True, apply_binary("==", False, False))

	def test_conditions_demand_a_flag(self):
		self.assertIs(True, primitive.as_flag(True))
		with self.assertRaises(TypeMismatch) as cm:
			primitive.as_flag(1)
		self.assertEqual(("flag", "integer"), (cm.exception.expected, cm.exception.found))


if __name__ == '__main__':
	unittest.main()
