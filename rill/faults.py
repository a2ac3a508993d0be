"""
Things that go wrong while running a program.

Every one of these aborts the whole execution: there are no partial results.
On the way out, each user-defined function the error passes through
appends its name to the `backtrace`, innermost first.
"""

class EngineError(Exception):
	""" Root of everything the run-time may raise on purpose. """
	def __init__(self, *args):
		super().__init__(*args)
		self.backtrace = []

	def describe(self) -> str:
		raise NotImplementedError(type(self))

	def __str__(self): return self.describe()

class UndefinedVariable(EngineError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self): return "There is no variable called %r in scope here." % self.name

class UninitializedVariable(EngineError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self): return "The variable %r is read before anything is assigned to it." % self.name

class UndefinedFunction(EngineError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self): return "There is no function called %r." % self.name

class DuplicateFunction(EngineError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self): return "The function %r is defined more than once." % self.name

class ImmutableAssignment(EngineError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self): return "Cannot assign twice to %r, which is not declared `mut`." % self.name

class DivisionByZero(EngineError):
	def __init__(self, glyph:str="/"):
		super().__init__(glyph)
		self.glyph = glyph
	def describe(self):
		if self.glyph == "%": return "Attempted to take a remainder with a divisor of zero."
		return "Attempted to divide by zero."

class TypeMismatch(EngineError):
	def __init__(self, expected:str, found:str):
		super().__init__(expected, found)
		self.expected, self.found = expected, found
	def describe(self): return "Expected a(n) %s but found a(n) %s." % (self.expected, self.found)

class ArityMismatch(EngineError):
	def __init__(self, function:str, expected:int, found:int):
		super().__init__(function, expected, found)
		self.function, self.expected, self.found = function, expected, found
	def describe(self):
		plural = '' if self.expected == 1 else 's'
		return "%s takes %d argument%s, but got %d instead." % (self.function, self.expected, plural, self.found)

class ControlEscaped(EngineError):
	"""
	A break, continue, or return turned up somewhere with nothing to catch it.
	A well-formed tree cannot do this, so it means the tree is malformed.
	"""
	def __init__(self, kind:str):
		super().__init__(kind)
		self.kind = kind
	def describe(self): return "A %s escaped from the construct that should have absorbed it." % self.kind

class StepLimitExceeded(EngineError):
	def __init__(self, limit:int):
		super().__init__(limit)
		self.limit = limit
	def describe(self): return "Gave up after %d steps." % self.limit

class DepthLimitExceeded(EngineError):
	def __init__(self, limit:int):
		super().__init__(limit)
		self.limit = limit
	def describe(self): return "Calls nested more than %d deep." % self.limit
