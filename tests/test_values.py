import math
import unittest

from lox.tree_walker.values import is_truthy, is_equal, stringify, NativeFunction, LoxCallable
from lox.primitive import NATIVES

class TruthinessTests(unittest.TestCase):
	def test_only_nil_and_false_are_falsey(self):
		assert not is_truthy(None)
		assert not is_truthy(False)
		for value in [True, 0.0, 1.0, "", "false", math.nan, NATIVES[0]]:
			with self.subTest(value=value):
				assert is_truthy(value)

class EqualityTests(unittest.TestCase):
	def test_same_kind(self):
		assert is_equal(None, None)
		assert is_equal(2.0, 2.0)
		assert is_equal("ab", "ab")
		assert is_equal(False, False)
		assert not is_equal(2.0, 3.0)
	
	def test_no_coercion_across_kinds(self):
		assert not is_equal("2", 2.0)
		assert not is_equal(None, False)
		assert not is_equal(False, None)
		assert not is_equal(1.0, True)
		assert not is_equal(0.0, False)
		assert not is_equal("", None)
	
	def test_numbers_compare_bitwise(self):
		assert is_equal(math.nan, math.nan)
		assert is_equal(math.inf, math.inf)
		assert not is_equal(0.0, -0.0)
		assert not is_equal(-0.0, 0.0)
		assert is_equal(-0.0, -0.0)
		assert not is_equal(math.nan, 1.0)
		assert not is_equal(1.0, math.nan)
	
	def test_callables_compare_by_identity(self):
		one = NativeFunction("f", 0, lambda: None)
		two = NativeFunction("f", 0, lambda: None)
		assert is_equal(one, one)
		assert not is_equal(one, two)

class StringifyTests(unittest.TestCase):
	def test_renderings(self):
		for value, expect in [
			(None, "nil"),
			(True, "true"),
			(False, "false"),
			(3.0, "3"),
			(-12.0, "-12"),
			(2.5, "2.5"),
			(0.1, "0.1"),
			(-0.0, "-0"),
			(1/3, "0.3333333333333333"),
			(1e16, "1e16"),
			(-2.5e20, "-2.5e20"),
			(1e-5, "1e-5"),
			(1.5e-7, "1.5e-7"),
			(123456789.0, "123456789"),
			(math.inf, "Infinity"),
			(-math.inf, "-Infinity"),
			(math.nan, "NaN"),
			("hello", "hello"),
			("", ""),
		]:
			with self.subTest(value=value):
				self.assertEqual(expect, stringify(value))
	
	def test_native_function_is_opaque(self):
		self.assertEqual("<native fn>", stringify(NativeFunction("f", 2, max)))

class NativeFunctionTests(unittest.TestCase):
	def test_protocol(self):
		fn = NativeFunction("add", 2, lambda a, b: a + b)
		assert isinstance(fn, LoxCallable)
		self.assertEqual(2, fn.arity())
		self.assertEqual(5.0, fn.call(None, [2.0, 3.0]))
	
	def test_clock(self):
		clock = {n.name: n for n in NATIVES}["clock"]
		self.assertEqual(0, clock.arity())
		t = clock.call(None, [])
		self.assertIsInstance(t, float)
		assert t > 0

if __name__ == '__main__':
	unittest.main()
