import sys
from typing import Optional, TextIO
from pathlib import Path
from boozetools.support.failureprone import SourceText, illustration

from .ontology import Token
from .faults import RuntimeFault

class Report:
	"""
	Where faults go to be told about.

	The interpreter hands every RuntimeFault it catches to `runtime_error`.
	The report keeps them (so a host can decide about exit codes) and writes
	them to stderr straight away, with a picture of the offending line if
	it was given the source text. Verbose levels gate the other chatter.
	"""
	faults : list[RuntimeFault]

	def __init__(self, *, verbose:int=0, source:Optional[str]=None, path:Optional[Path]=None, stream:Optional[TextIO]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._stream = stream
		self._source = None if source is None else SourceText(source, filename=str(path) if path else None)
		self.faults = []

	def ok(self): return not self.faults
	def sick(self): return bool(self.faults)

	def reset(self):
		self.faults.clear()

	def _err(self) -> TextIO:
		# Look this up late so that redirecting sys.stderr still works.
		return self._stream or sys.stderr

	def info(self, *args, level:int=1):
		if self._verbose >= level:
			print(*args, file=self._err())

	def runtime_error(self, fault:RuntimeFault):
		self.faults.append(fault)
		err = self._err()
		print(fault.message, file=err)
		print("[line %d]" % fault.token.line(), file=err)
		if self._source is not None and fault.token.start is not None:
			print(Annotation(fault.token, fault.kind).illustrate(self._source), file=err)
		err.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self.faults:
			raise AssertionError(message + "\n" + "\n".join(map(str, self.faults)))

class Annotation:
	def __init__(self, token:Token, caption:str=""):
		self.token = token
		self.caption = caption
	def illustrate(self, source:SourceText):
		row, col = source.find_row_col(self.token.start)
		single_line = source.line_of_text(row)
		return illustration(single_line, col, self.token.width(), prefix='% 6d |' % row, caption=self.caption)
