"""
This module defines the specialized value-types that the tree-walker operates in terms of,
along with the rules every operator shares: truthiness, equality, and how a value prints.
"""
import math
from abc import abstractmethod
from typing import Callable
from .types import LoxValue, VALUE, ARGS

def is_truthy(value:VALUE) -> bool:
	if value is None: return False
	if isinstance(value, bool): return value
	return True

def is_number(value:VALUE) -> bool:
	# bool is an int subclass in Python, but never a float.
	return isinstance(value, float)

def is_equal(a:VALUE, b:VALUE) -> bool:
	""" No coercion: values of different kinds are never equal. """
	if a is None: return b is None
	if type(a) is not type(b): return False
	if isinstance(a, float): return _same_number(a, b)
	return a == b

def _same_number(a:float, b:float) -> bool:
	# Bitwise sameness, not IEEE: NaN matches NaN, and 0 does not match -0.
	if math.isnan(a): return math.isnan(b)
	return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)

def stringify(value:VALUE) -> str:
	if value is None: return "nil"
	if isinstance(value, bool): return "true" if value else "false"
	if isinstance(value, float):
		if math.isnan(value): return "NaN"
		if math.isinf(value): return "Infinity" if value > 0 else "-Infinity"
		# Shortest round-trip digits, with neither a ".0" tail nor a padded exponent.
		mantissa, e, exponent = repr(value).partition("e")
		if mantissa.endswith(".0"): mantissa = mantissa[:-2]
		if e: return "%se%d" % (mantissa, int(exponent))
		return mantissa
	return str(value)

###############################################################################

class LoxCallable(LoxValue):
	""" A run-time object that can be applied with arguments. """
	@abstractmethod
	def arity(self) -> int: pass

	@abstractmethod
	def call(self, interpreter, arguments: ARGS) -> VALUE:
		"""
		The interpreter comes along so that a callable with a body
		can run it in a fresh child of whatever scope it needs.
		"""

class NativeFunction(LoxCallable):
	""" Host-provided: a plain Python function with a fixed arity and no access to scopes. """
	def __init__(self, name:str, arity:int, fn:Callable[..., VALUE]):
		self.name = name
		self._arity = arity
		self._fn = fn

	def __repr__(self): return "<native fn %s/%d>" % (self.name, self._arity)
	def __str__(self): return "<native fn>"

	def arity(self) -> int: return self._arity

	def call(self, interpreter, arguments: ARGS) -> VALUE:
		return self._fn(*arguments)
