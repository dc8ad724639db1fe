"""
The expression half of the tree-walker.

Each kind of expression node gets one `visit_` method. Every one of them
either returns exactly one value or raises exactly one RuntimeFault;
nothing here catches a fault, so they unwind straight to the driver.
"""

import math
import operator
from boozetools.support.foundation import Visitor
from .. import syntax
from ..ontology import Token
from ..environment import Environment
from ..faults import type_mismatch, arity_mismatch
from .types import VALUE
from .values import LoxCallable, is_truthy, is_number, is_equal

def _divide(a:float, b:float) -> float:
	# Python raises ZeroDivisionError, but Lox wants the IEEE answer.
	if b: return a / b
	if a == 0 or math.isnan(a): return math.nan
	return math.copysign(math.inf, a) * math.copysign(1.0, b)

NUMERIC_BINARY = {
	">"  : operator.gt,
	">=" : operator.ge,
	"<"  : operator.lt,
	"<=" : operator.le,
	"-"  : operator.sub,
	"*"  : operator.mul,
	"/"  : _divide,
}
EQUALITY = {
	"==" : is_equal,
	"!=" : lambda a, b: not is_equal(a, b),
}
SHORTCUT = {
	"and" : False,
	"or"  : True,
}

def _check_number_operand(op:Token, operand:VALUE):
	if not is_number(operand):
		raise type_mismatch(op, "Operand must be a number.")

def _plus(op:Token, left:VALUE, right:VALUE) -> VALUE:
	if is_number(left) and is_number(right): return left + right
	if isinstance(left, str) and isinstance(right, str): return left + right
	raise type_mismatch(op, "Operands must be two numbers or two strings.")

class Evaluator(Visitor):
	"""
	Computes the value of expressions against the current scope.
	The current scope is the only state; statements (see executor) move it around.
	"""
	environment: Environment

	def __init__(self, environment:Environment):
		self.environment = environment

	def evaluate(self, expr:syntax.Expression) -> VALUE:
		return self.visit(expr)

	def visit_Literal(self, expr:syntax.Literal):
		return expr.value

	def visit_Grouping(self, expr:syntax.Grouping):
		return self.evaluate(expr.expression)

	def visit_Unary(self, expr:syntax.Unary):
		right = self.evaluate(expr.right)
		op = expr.op.text
		if op == "!": return not is_truthy(right)
		if op == "-":
			_check_number_operand(expr.op, right)
			return -right
		raise NotImplementedError(op)

	def visit_Binary(self, expr:syntax.Binary):
		left = self.evaluate(expr.left)
		right = self.evaluate(expr.right)
		op = expr.op.text
		if op in EQUALITY: return EQUALITY[op](left, right)
		if op == "+": return _plus(expr.op, left, right)
		try: fn = NUMERIC_BINARY[op]
		except KeyError: raise NotImplementedError(op)
		if is_number(left) and is_number(right): return fn(left, right)
		raise type_mismatch(expr.op, "Operands must be numbers.")

	def visit_Logical(self, expr:syntax.Logical):
		# The deciding operand comes back as itself, not as a boolean.
		left = self.evaluate(expr.left)
		if is_truthy(left) == SHORTCUT[expr.op.text]: return left
		return self.evaluate(expr.right)

	def visit_Variable(self, expr:syntax.Variable):
		return self.environment.get(expr.name)

	def visit_Assign(self, expr:syntax.Assign):
		value = self.evaluate(expr.value)
		return self.environment.assign(expr.name, value)

	def visit_Call(self, expr:syntax.Call):
		callee = self.evaluate(expr.callee)
		arguments = [self.evaluate(arg) for arg in expr.arguments]
		if not isinstance(callee, LoxCallable):
			raise type_mismatch(expr.paren, "Can only call functions and classes.")
		if len(arguments) != callee.arity():
			raise arity_mismatch(expr.paren, callee.arity(), len(arguments))
		return callee.call(self, arguments)
