"""
The statement executor.

Every method here answers a control outcome. Whatever runs sub-statements must
look at each outcome and, unless it is normal, stop and hand it outward.
Break and continue stop at the nearest loop; return stops only at the call.
"""
from typing import Optional
from .. import syntax
from ..stacking import Frame, UNSET
from ..faults import ControlEscaped
from ..primitive import UNIT, as_flag, as_integer
from .evaluator import execute, settle, attach_methods, EXECUTE
from .outcome import OUTCOME, Completion, Breaking, Returning, NORMAL, CONTINUING, BARE_BREAK

def run_steps(block:syntax.Block, frame:Frame) -> OUTCOME:
	""" The block's value is whatever its last step settled to. """
	outcome = NORMAL
	for step in block.steps:
		outcome = execute(step, frame)
		if not outcome.is_normal(): return outcome
	return outcome

def _exec_block(stmt:syntax.Block, frame:Frame):
	return run_steps(stmt, frame.child())

def _exec_let(stmt:syntax.Let, frame:Frame):
	if stmt.expr is None:
		frame.declare(stmt.nom.text, UNSET, stmt.mutable)
		return NORMAL
	outcome = settle(stmt.expr, frame)
	if not outcome.is_normal(): return outcome
	frame.declare(stmt.nom.text, outcome.value, stmt.mutable)
	return NORMAL

def _exec_assign(stmt:syntax.Assign, frame:Frame):
	outcome = settle(stmt.expr, frame)
	if not outcome.is_normal(): return outcome
	frame.assign(stmt.nom.text, outcome.value)
	return NORMAL

def _exec_expr_stmt(stmt:syntax.ExprStmt, frame:Frame):
	return settle(stmt.expr, frame)

def _exec_nothing(stmt:syntax.Nothing, frame:Frame):
	return NORMAL

def _exec_if_then(stmt:syntax.IfThen, frame:Frame):
	cond = settle(stmt.cond, frame)
	if not cond.is_normal(): return cond
	if as_flag(cond.value): return execute(stmt.then_part, frame)
	if stmt.else_part is None: return NORMAL
	return execute(stmt.else_part, frame)

def _exec_loop(stmt:syntax.Loop, frame:Frame):
	while True:
		outcome = execute(stmt.body, frame)
		if isinstance(outcome, Breaking):
			return NORMAL if outcome.value is None else Completion(outcome.value)
		if isinstance(outcome, Returning):
			return outcome
		# Normal completion and continue both go around again.

def _after_iteration(outcome:OUTCOME) -> Optional[OUTCOME]:
	"""
	For the loops that cannot break with a value:
	None means carry on with the next iteration; otherwise finish with the answer.
	"""
	if isinstance(outcome, Breaking):
		if outcome.value is not None: raise ControlEscaped("break-with-value")
		return NORMAL
	if isinstance(outcome, Returning):
		return outcome

def _exec_while_loop(stmt:syntax.WhileLoop, frame:Frame):
	while True:
		cond = settle(stmt.cond, frame)
		if not cond.is_normal(): return cond
		if not as_flag(cond.value): return NORMAL
		answer = _after_iteration(execute(stmt.body, frame))
		if answer is not None: return answer

def _exec_for_range(stmt:syntax.ForRange, frame:Frame):
	lo = settle(stmt.lo, frame)
	if not lo.is_normal(): return lo
	hi = settle(stmt.hi, frame)
	if not hi.is_normal(): return hi
	for i in range(as_integer(lo.value), as_integer(hi.value)):
		# A fresh binding each time around; assigning to it cannot affect the count.
		inner = frame.child()
		inner.declare(stmt.nom.text, i, stmt.mutable)
		answer = _after_iteration(execute(stmt.body, inner))
		if answer is not None: return answer
	return NORMAL

def _exec_break(stmt:syntax.Break, frame:Frame):
	if stmt.expr is None: return BARE_BREAK
	outcome = settle(stmt.expr, frame)
	if not outcome.is_normal(): return outcome
	return Breaking(outcome.value)

def _exec_continue(stmt:syntax.Continue, frame:Frame):
	return CONTINUING

def _exec_return(stmt:syntax.Return, frame:Frame):
	if stmt.expr is None: return Returning(UNIT)
	outcome = settle(stmt.expr, frame)
	if not outcome.is_normal(): return outcome
	return Returning(outcome.value)

attach_methods(globals(), "_exec_", EXECUTE, "stmt")
