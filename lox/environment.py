"""
Simplest possible environment concept.

This is the canonical list-structured search: each scope holds its own
bindings plus a link to the scope it sits inside. Blocks make a child scope
on the way in and simply stop using it on the way out; anything still
holding a reference (a future closure, say) keeps it alive.
"""
from typing import Any, Optional
from .ontology import Token
from .faults import undefined_variable

class Environment:
	_values: dict[str, Any]
	enclosing: Optional["Environment"]

	def __init__(self, enclosing:Optional["Environment"]=None):
		self._values = {}
		self.enclosing = enclosing

	def __repr__(self):
		return "<Environment %s%s>" % (sorted(self._values), " ..." if self.enclosing else "")

	def __contains__(self, name:str) -> bool:
		return self._where(name) is not None

	def child(self) -> "Environment":
		return Environment(self)

	def define(self, name:str, value:Any):
		""" Always local. Re-declaring a name in the same scope just overwrites it. """
		self._values[name] = value

	def get(self, name:Token) -> Any:
		scope = self._where(name.text)
		if scope is None: raise undefined_variable(name)
		return scope._values[name.text]

	def assign(self, name:Token, value:Any) -> Any:
		""" Mutates the nearest existing binding; never creates one. """
		scope = self._where(name.text)
		if scope is None: raise undefined_variable(name)
		scope._values[name.text] = value
		return value

	def _where(self, key:str) -> Optional["Environment"]:
		scope = self
		while scope is not None:
			if key in scope._values: return scope
			scope = scope.enclosing
		return None
