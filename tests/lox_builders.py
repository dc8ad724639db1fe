"""
Shorthand for building syntax trees by hand, since there is no parser here.
Every token lands on line 1 unless asked otherwise.
"""
from lox import syntax
from lox.ontology import Token
from lox.tree_walker.values import NativeFunction

def tok(text, line=1, start=None): return Token(text, line, start)

def num(n, line=1): return syntax.Literal(float(n), tok(repr(n), line))
def text(s, line=1): return syntax.Literal(s, tok('"%s"' % s, line))
def nil(): return syntax.Literal(None, tok("nil"))
def true(): return syntax.Literal(True, tok("true"))
def false(): return syntax.Literal(False, tok("false"))

def var(name, line=1): return syntax.Variable(tok(name, line))
def group(expr): return syntax.Grouping(expr)
def unary(op, right, line=1): return syntax.Unary(tok(op, line), right)
def binary(left, op, right, line=1): return syntax.Binary(left, tok(op, line), right)
def logical(left, op, right, line=1): return syntax.Logical(left, tok(op, line), right)
def assign(name, value, line=1): return syntax.Assign(tok(name, line), value)
def call(callee, *args, line=1): return syntax.Call(callee, tok(")", line), args)

def expr_stmt(expr): return syntax.ExpressionStatement(expr)
def print_(expr, line=1): return syntax.Print(expr, tok("print", line))
def declare(name, initializer=None, line=1): return syntax.Var(tok(name, line), initializer)
def block(*statements): return syntax.Block(statements, tok("{"))
def if_(condition, then_branch, else_branch=None): return syntax.If(condition, then_branch, else_branch)
def while_(condition, body): return syntax.While(condition, body)

def recorder(name, log, arity=1):
	""" A native that notes each argument list it sees and hands back its first argument. """
	def fn(*args):
		log.append((name,) + args)
		return args[0] if args else None
	return NativeFunction(name, arity, fn)
