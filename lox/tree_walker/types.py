"""
This module aims to express an interface agreement
between the evaluator and various kinds of data.

Nil, booleans, numbers and strings play themselves as None, bool, float and str.
Anything more elaborate (so far only callables) roots at LoxValue.
"""

from abc import ABC
from typing import Sequence, Union

class LoxValue(ABC):
	""" Root for classes that implement specialized run-time data structures """

NATIVE_DATA = Union[None, bool, float, str]
VALUE = Union[NATIVE_DATA, LoxValue]
ARGS = Sequence[VALUE]
