"""
Build the primitive namespace.
These are the natives every program can see from the first statement on.
"""
import time
from .environment import Environment
from .tree_walker.values import NativeFunction

def _clock() -> float:
	return time.time()

NATIVES = (
	NativeFunction("clock", 0, _clock),
)

def install(globals_:Environment):
	for native in NATIVES:
		globals_.define(native.name, native)
