"""
The run-time environment: a chain of frames, innermost first.

A block, a loop body, or a single loop iteration gets a `Scope`; a call gets an `Activation`.
Each frame is dropped when the construct that made it is finished, whichever way it finishes.
Nothing else keeps a reference, so there is nothing to pop explicitly.

Function bodies do not see their caller's variables: an activation's outer link
goes straight to the `RootFrame`, which knows the program's functions and the
limits for this one execution.
"""

from typing import Optional
from .syntax import Function
from .faults import (
	UndefinedVariable, UninitializedVariable, UndefinedFunction, ImmutableAssignment,
	StepLimitExceeded, DepthLimitExceeded,
)

class _Unset:
	""" The content of a binding declared without an initializer. """
	def __repr__(self): return "<unset>"

UNSET = _Unset()

class Binding:
	""" A named, possibly-mutable storage cell. Its owning frame holds the name. """
	__slots__ = ("value", "mutable")
	def __init__(self, value, mutable:bool):
		self.value, self.mutable = value, mutable
	def __repr__(self): return "<%s%r>" % ("mut " if self.mutable else "", self.value)

class Frame:
	_bindings : dict[str, Binding]
	outer : Optional["Frame"]
	root : "RootFrame"

	def holds(self, name:str) -> bool: return name in self._bindings

	def declare(self, name:str, value, mutable:bool=False):
		# Declaring a name again in the same frame simply rebinds it, as `let` shadowing does.
		self._bindings[name] = Binding(value, mutable)
		return value

	def find(self, name:str) -> Binding:
		frame = self
		while frame is not None:
			try: return frame._bindings[name]
			except KeyError: frame = frame.outer
		raise UndefinedVariable(name)

	def lookup(self, name:str):
		value = self.find(name).value
		if value is UNSET: raise UninitializedVariable(name)
		return value

	def assign(self, name:str, value):
		binding = self.find(name)
		# The first assignment to an unset binding is its initialization, `mut` or not.
		if not binding.mutable and binding.value is not UNSET: raise ImmutableAssignment(name)
		binding.value = value
		return value

	def child(self) -> "Scope":
		return Scope(self)

	def __repr__(self):
		return "%s%r" % (type(self).__name__, self._bindings)

class RootFrame(Frame):
	""" The bottom of every chain for one execution. Holds functions, not variables. """
	def __init__(self, functions:dict[str, Function], *, report=None, step_limit:int=None, depth_limit:int=None):
		self._bindings = {}
		self.outer = None
		self.root = self
		self.functions = functions
		self.report = report
		self.step_limit = step_limit
		self.depth_limit = depth_limit
		self.steps = 0
		self.depth = 0

	def function(self, name:str) -> Function:
		try: return self.functions[name]
		except KeyError: raise UndefinedFunction(name) from None

	def tick(self):
		self.steps += 1
		if self.step_limit is not None and self.steps > self.step_limit:
			raise StepLimitExceeded(self.step_limit)

	def enter(self):
		self.depth += 1
		if self.depth_limit is not None and self.depth > self.depth_limit:
			self.depth -= 1
			raise DepthLimitExceeded(self.depth_limit)

	def leave(self):
		self.depth -= 1

	def info(self, *args):
		if self.report is not None:
			self.report.info("  " * (self.depth - 1), *args)

class Scope(Frame):
	def __init__(self, outer:Frame):
		self._bindings = {}
		self.outer = outer
		self.root = outer.root

class Activation(Frame):
	""" One call's top-level frame. The parameters live here. """
	def __init__(self, root:RootFrame, breadcrumb:Function):
		self._bindings = {}
		self.outer = root
		self.root = root
		self.breadcrumb = breadcrumb
