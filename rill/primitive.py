"""
The value model, and the primitive operators over it.

Basic primitive values play themselves: Python `int` for integers
and `bool` for flags. Python considers `bool` a kind of `int`,
so anything that cares about the difference asks `kind_of`.

Integers behave as 64-bit two's-complement machine words:
arithmetic wraps around, division truncates toward zero,
and the remainder takes the sign of the dividend.
"""
import operator
from .faults import DivisionByZero, TypeMismatch

INT_BITS = 64
_MODULUS = 1 << INT_BITS
_HALF = 1 << (INT_BITS - 1)
MIN_INT, MAX_INT = -_HALF, _HALF - 1

INTEGER = "integer"
FLAG = "flag"
NO_VALUE = "unit"

class _Unit:
	""" What things that have no value evaluate to, such as a while-loop or a let-binding. """
	def __repr__(self): return "()"
	def __bool__(self): return False

UNIT = _Unit()

def kind_of(value) -> str:
	if value is UNIT: return NO_VALUE
	if isinstance(value, bool): return FLAG
	if isinstance(value, int): return INTEGER
	return type(value).__name__

def wrap(n:int) -> int:
	return ((n + _HALF) % _MODULUS) - _HALF

def as_integer(value) -> int:
	kind = kind_of(value)
	if kind != INTEGER: raise TypeMismatch(INTEGER, kind)
	return value

def as_flag(value) -> bool:
	""" Conditions demand a flag. Python's notion of truthiness does not apply here. """
	kind = kind_of(value)
	if kind != FLAG: raise TypeMismatch(FLAG, kind)
	return value

def _divide(a:int, b:int) -> int:
	if b == 0: raise DivisionByZero("/")
	q = abs(a) // abs(b)
	return wrap(q if (a < 0) == (b < 0) else -q)

def _remainder(a:int, b:int) -> int:
	if b == 0: raise DivisionByZero("%")
	r = abs(a) % abs(b)
	return -r if a < 0 else r

ARITHMETIC = {
	"+" : lambda a, b: wrap(a + b),
	"-" : lambda a, b: wrap(a - b),
	"*" : lambda a, b: wrap(a * b),
	"/" : _divide,
	"%" : _remainder,
}

RELATIONAL = {
	"<"  : operator.lt,
	"<=" : operator.le,
	">"  : operator.gt,
	">=" : operator.ge,
}

EQUALITY = {
	"==" : operator.eq,
	"!=" : operator.ne,
}

# The right operand is not evaluated when the left one settles the question.
# The value is what the left operand must be to settle it.
SHORTCUT = {
	"&&" : False,
	"||" : True,
}

def apply_binary(glyph:str, a, b):
	if glyph in ARITHMETIC:
		return ARITHMETIC[glyph](as_integer(a), as_integer(b))
	if glyph in RELATIONAL:
		return RELATIONAL[glyph](as_integer(a), as_integer(b))
	if glyph in EQUALITY:
		left, right = kind_of(a), kind_of(b)
		if left != right: raise TypeMismatch(left, right)
		return EQUALITY[glyph](a, b)
	raise NotImplementedError(glyph)

UNARY = {
	"-" : lambda a: wrap(-as_integer(a)),
	"!" : lambda a: not as_flag(a),
}

def apply_unary(glyph:str, a):
	try: fn = UNARY[glyph]
	except KeyError: raise NotImplementedError(glyph)
	return fn(a)
