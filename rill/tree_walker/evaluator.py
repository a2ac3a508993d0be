"""
The generic machinery that everything needs,
without the specific methods corresponding to particular syntax.

Dispatch is by the exact type of the node, through two tables:
one for expressions (which compute values) and one for statements
(which compute control outcomes). The `runtime` and `executor`
modules fill them in.
"""

from ..ontology import ValueExpression, Statement
from ..stacking import Frame
from ..faults import ControlEscaped
from .outcome import OUTCOME, Completion

EVALUATE = {}
EXECUTE = {}

def evaluate(expr:ValueExpression, frame:Frame):
	assert isinstance(frame, Frame), frame
	try: fn = EVALUATE[type(expr)]
	except KeyError:
		if isinstance(expr, Statement): return demand_value(expr, frame)
		raise NotImplementedError(type(expr), expr)
	return fn(expr, frame)

def execute(stmt:Statement, frame:Frame) -> OUTCOME:
	assert isinstance(frame, Frame), frame
	frame.root.tick()
	try: fn = EXECUTE[type(stmt)]
	except KeyError: raise NotImplementedError(type(stmt), stmt)
	return fn(stmt, frame)

def settle(item, frame:Frame) -> OUTCOME:
	"""
	For operand positions within statements, which may hold either kind of node.
	A statement (such as an if-expression) may finish abnormally, and that outcome must travel on.
	"""
	if isinstance(item, Statement): return execute(item, frame)
	return Completion(evaluate(item, frame))

def demand_value(stmt:Statement, frame:Frame):
	"""
	A statement used deep inside an expression, as in `1 + if c { 2 } else { 3 }`.
	There is no way to carry a break or return out through an expression.
	"""
	outcome = execute(stmt, frame)
	if outcome.is_normal(): return outcome.value
	raise ControlEscaped(outcome.kind)

def attach_methods(python_scope, prefix:str, table:dict, param:str):
	for _k, _v in list(python_scope.items()):
		if _k.startswith(prefix):
			_t = _v.__annotations__[param]
			assert isinstance(_t, type), (_k, _t)
			table[_t] = _v

# Importing either half installs both; each needs the other.
from . import runtime, executor  # NOQA
