"""
The one way a Lox program can go wrong at run-time.

Every language-level failure is a RuntimeFault. They differ only by kind and
message, so a driver needs to catch exactly one thing.
"""
from .ontology import Token

UNDEFINED_VARIABLE = "UndefinedVariable"
TYPE_MISMATCH = "TypeMismatch"
ARITY_MISMATCH = "ArityMismatch"

class RuntimeFault(Exception):
	def __init__(self, kind:str, token:Token, message:str):
		super().__init__(message)
		assert isinstance(token, Token), token
		self.kind, self.token, self.message = kind, token, message

	def __str__(self): return "%s\n[line %d]" % (self.message, self.token.line())

def undefined_variable(name:Token) -> RuntimeFault:
	return RuntimeFault(UNDEFINED_VARIABLE, name, "Undefined variable '%s'." % name.text)

def type_mismatch(token:Token, message:str) -> RuntimeFault:
	return RuntimeFault(TYPE_MISMATCH, token, message)

def arity_mismatch(token:Token, need:int, got:int) -> RuntimeFault:
	message = "Expected %d arguments but got %d." % (need, got)
	return RuntimeFault(ARITY_MISMATCH, token, message)
