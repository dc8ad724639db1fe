"""
The most-fundamental classes in the syntax hierarchy live apart from the
concrete node types so the run-time can name them without import cycles.
A front end (not part of this package) builds everything out of these.
"""
from typing import Optional

class Phrase:
	def token(self) -> "Token":
		""" Return the token that best stands for this phrase in an error message """
		raise NotImplementedError(type(self))
	def line(self) -> int:
		token = self.token()
		return 0 if token is None else token.line()

class Token(Phrase):
	"""
	Representing one lexeme in the source.
	The line is what faults report; the start offset, when the front end
	knows it, lets the diagnostics illustrate the exact spot.
	"""
	text: str
	line_no: int
	start: Optional[int]
	def __init__(self, text:str, line:int, start:Optional[int]=None):
		assert isinstance(text, str)
		assert isinstance(line, int), type(line)
		self.text, self.line_no, self.start = text, line, start
	def __repr__(self): return "<Token %r @%d>" % (self.text, self.line_no)
	def token(self): return self
	def line(self): return self.line_no
	def width(self): return max(len(self.text), 1)

class Expression(Phrase): pass

class Statement(Phrase): pass
