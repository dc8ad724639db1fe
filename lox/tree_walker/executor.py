"""
The statement half of the tree-walker: side effects, scoping, and control flow.
"""
import sys
from typing import Optional, Sequence, TextIO
from .. import syntax
from ..diagnostics import Report
from ..environment import Environment
from .evaluator import Evaluator
from .values import is_truthy, stringify

class Executor(Evaluator):
	def __init__(self, environment:Environment, report:Report, out:Optional[TextIO]=None):
		super().__init__(environment)
		self._report = report
		self._out = out

	def execute(self, stmt:syntax.Statement):
		self._report.info("exec", type(stmt).__name__, "line %d" % stmt.line(), level=2)
		self.visit(stmt)

	def execute_block(self, statements:Sequence[syntax.Statement], environment:Environment):
		"""
		Run the statements in the given scope, then put the old scope back
		whether they finish, fault, or something worse happens.
		"""
		previous = self.environment
		try:
			self.environment = environment
			for stmt in statements:
				self.execute(stmt)
		finally:
			self.environment = previous

	def emit(self, text:str):
		print(text, file=self._out or sys.stdout)

	def visit_ExpressionStatement(self, stmt:syntax.ExpressionStatement):
		self.evaluate(stmt.expression)

	def visit_Print(self, stmt:syntax.Print):
		self.emit(stringify(self.evaluate(stmt.expression)))

	def visit_Var(self, stmt:syntax.Var):
		value = None
		if stmt.initializer is not None:
			value = self.evaluate(stmt.initializer)
		self.environment.define(stmt.name.text, value)

	def visit_Block(self, stmt:syntax.Block):
		self.execute_block(stmt.statements, self.environment.child())

	def visit_If(self, stmt:syntax.If):
		if is_truthy(self.evaluate(stmt.condition)):
			self.execute(stmt.then_branch)
		elif stmt.else_branch is not None:
			self.execute(stmt.else_branch)

	def visit_While(self, stmt:syntax.While):
		while is_truthy(self.evaluate(stmt.condition)):
			self.execute(stmt.body)
