"""
The set of parse-nodes in simple form.
A front end calls these constructors bottom-up; the tree-walker reads them.
Nothing here evaluates anything: each class is just the shape of one node,
dispatched on by class name (see tree_walker.evaluator and tree_walker.executor).
"""
from typing import Any, Optional, Sequence
from .ontology import Token, Expression, Statement

###############################################################################
# Expressions

class Literal(Expression):
	value: Any
	def __init__(self, value: Any, token: Optional[Token] = None):
		# The front end may hand over a Python int for a numeral.
		# Lox has only the one number type, so settle that here.
		if type(value) is int: value = float(value)
		assert value is None or isinstance(value, (bool, float, str)), type(value)
		self.value, self._token = value, token
	def __str__(self): return "<Literal %r>" % self.value
	def token(self): return self._token

class Grouping(Expression):
	def __init__(self, expression: Expression):
		self.expression = expression
	def __str__(self): return "(group %s)" % self.expression
	def token(self): return self.expression.token()

class Unary(Expression):
	def __init__(self, op: Token, right: Expression):
		self.op, self.right = op, right
	def __str__(self): return "(%s %s)" % (self.op.text, self.right)
	def token(self): return self.op

class Binary(Expression):
	def __init__(self, left: Expression, op: Token, right: Expression):
		self.left, self.op, self.right = left, op, right
	def __str__(self): return "(%s %s %s)" % (self.op.text, self.left, self.right)
	def token(self): return self.op

class Logical(Binary):
	""" The short-circuit operators `and` and `or` """

class Variable(Expression):
	def __init__(self, name: Token): self.name = name
	def __str__(self): return self.name.text
	def token(self): return self.name

class Assign(Expression):
	def __init__(self, name: Token, value: Expression):
		self.name, self.value = name, value
	def __str__(self): return "(= %s %s)" % (self.name.text, self.value)
	def token(self): return self.name

class Call(Expression):
	# The closing parenthesis stands for the call in error messages.
	def __init__(self, callee: Expression, paren: Token, arguments: Sequence[Expression]):
		self.callee, self.paren, self.arguments = callee, paren, tuple(arguments or ())
	def __str__(self):
		return "%s(%s)" % (self.callee, ', '.join(map(str, self.arguments)))
	def token(self): return self.paren

###############################################################################
# Statements

class ExpressionStatement(Statement):
	def __init__(self, expression: Expression): self.expression = expression
	def token(self): return self.expression.token()

class Print(Statement):
	def __init__(self, expression: Expression, keyword: Optional[Token] = None):
		self.expression, self._keyword = expression, keyword
	def token(self): return self._keyword or self.expression.token()

class Var(Statement):
	initializer: Optional[Expression]
	def __init__(self, name: Token, initializer: Optional[Expression] = None):
		self.name, self.initializer = name, initializer
	def token(self): return self.name

class Block(Statement):
	def __init__(self, statements: Sequence[Statement], brace: Optional[Token] = None):
		self.statements, self._brace = tuple(statements), brace
	def token(self):
		if self._brace is not None: return self._brace
		if self.statements: return self.statements[0].token()
		return None

class If(Statement):
	else_branch: Optional[Statement]
	def __init__(self, condition: Expression, then_branch: Statement, else_branch: Optional[Statement] = None):
		self.condition, self.then_branch, self.else_branch = condition, then_branch, else_branch
	def token(self): return self.condition.token()

class While(Statement):
	def __init__(self, condition: Expression, body: Statement):
		self.condition, self.body = condition, body
	def token(self): return self.condition.token()
