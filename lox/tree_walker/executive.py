"""
This is the overall control for the run-time: the part a REPL or a file
runner talks to. It owns the global scope, so consecutive runs on the same
interpreter see each other's variables.
"""
from typing import Iterable, Optional, TextIO
from .. import syntax, primitive
from ..diagnostics import Report
from ..environment import Environment
from ..faults import RuntimeFault
from .executor import Executor
from .values import stringify

class Interpreter(Executor):
	globals: Environment

	def __init__(self, report:Optional[Report]=None, *, out:Optional[TextIO]=None, global_scope:Optional[Environment]=None):
		if global_scope is None: global_scope = Environment()
		primitive.install(global_scope)
		self.globals = global_scope
		super().__init__(global_scope, report or Report(), out)

	@property
	def report(self) -> Report: return self._report

	@property
	def had_runtime_error(self) -> bool: return self._report.sick()

	def interpret(self, statements:Iterable[syntax.Statement]) -> bool:
		"""
		Run a whole program top to bottom.
		The first fault gets reported and ends the run; answers whether it went clean.
		"""
		statements = list(statements)
		self._report.info("Running %d statement(s)" % len(statements))
		try:
			for stmt in statements:
				self.execute(stmt)
		except RuntimeFault as fault:
			self._fault(fault)
			return False
		return True

	def interpret_expression(self, expr:syntax.Expression) -> bool:
		""" For immediate feedback: evaluate one expression and print what it comes to. """
		try:
			value = self.evaluate(expr)
		except RuntimeFault as fault:
			self._fault(fault)
			return False
		self.emit(stringify(value))
		return True

	def _fault(self, fault:RuntimeFault):
		self._report.info("Run halted by %s on line %d" % (fault.kind, fault.token.line()))
		self._report.runtime_error(fault)
