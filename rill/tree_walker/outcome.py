"""
What executing a statement produces: normal completion, break, continue, or return.

Every statement-executing function hands one of these back, and every construct
that runs sub-statements looks at the outcome before going on. Nothing is thrown:
a break or a return travels outward as an ordinary value until the construct
that absorbs it (a loop, or a call, respectively) sees it.
"""
from typing import Any, Union
from ..primitive import UNIT

class Outcome:
	__slots__ = ("value",)
	kind = "?"
	def __init__(self, value:Any=UNIT): self.value = value
	def is_normal(self) -> bool: return False
	def __eq__(self, other):
		return type(self) is type(other) and self.value == other.value
	def __hash__(self): return hash((type(self), self.value))
	def __repr__(self): return "<%s %r>" % (self.kind, self.value)

class Completion(Outcome):
	""" Normal completion. The value is UNIT unless a value-bearing construct came last. """
	kind = "normal"
	def is_normal(self) -> bool: return True

class Breaking(Outcome):
	""" A break; `value` is None for a bare break. Absorbed by the nearest loop. """
	kind = "break"
	def __init__(self, value:Any=None): super().__init__(value)

class Continuing(Outcome):
	""" Absorbed by the nearest loop, which goes on to the next iteration. """
	kind = "continue"

class Returning(Outcome):
	""" Absorbed only at the boundary of a function call. """
	kind = "return"

OUTCOME = Union[Completion, Breaking, Continuing, Returning]

NORMAL = Completion()
CONTINUING = Continuing()
BARE_BREAK = Breaking()
