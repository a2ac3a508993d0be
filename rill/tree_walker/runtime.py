"""
The expression evaluator.

Expressions only ever compute values. Operands go left-then-right.
A call may return from deep inside its own body, but by the time
the value gets back here that has been settled into a plain value.
"""
from .. import syntax
from ..stacking import Frame
from ..primitive import SHORTCUT, apply_binary, apply_unary, as_flag
from .evaluator import evaluate, attach_methods, EVALUATE
from . import values

def _eval_literal(expr:syntax.Literal, frame:Frame):
	return expr.value

def _eval_lookup(expr:syntax.Lookup, frame:Frame):
	return frame.lookup(expr.nom.text)

def _eval_bin_exp(expr:syntax.BinExp, frame:Frame):
	lhs = evaluate(expr.lhs, frame)
	if expr.op in SHORTCUT:
		if as_flag(lhs) == SHORTCUT[expr.op]: return lhs
		return as_flag(evaluate(expr.rhs, frame))
	rhs = evaluate(expr.rhs, frame)
	return apply_binary(expr.op, lhs, rhs)

def _eval_unary_exp(expr:syntax.UnaryExp, frame:Frame):
	return apply_unary(expr.op, evaluate(expr.arg, frame))

def _eval_call(expr:syntax.Call, frame:Frame):
	args = tuple(evaluate(a, frame) for a in expr.args)
	function = frame.root.function(expr.callee.text)
	return values.call(function, args, frame.root)

attach_methods(globals(), "_eval_", EVALUATE, "expr")
