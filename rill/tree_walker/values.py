"""
The call dispatcher: from a function and some argument values, to a result value.

This is the one place a `return` outcome gets absorbed.
"""
from typing import Sequence
from .. import syntax
from ..faults import EngineError, ArityMismatch, ControlEscaped
from ..stacking import RootFrame, Activation
from .outcome import OUTCOME, Completion, Returning
from . import executor

def call(function:syntax.Function, args:Sequence, root:RootFrame):
	name = function.key()
	if len(args) != function.arity():
		raise ArityMismatch(name, function.arity(), len(args))
	root.enter()
	frame = Activation(root, function)
	try:
		root.info("%s(%s)" % (name, ", ".join(map(repr, args))))
		for param, arg in zip(function.params, args):
			frame.declare(param.key(), arg, param.mutable)
		# The body's steps run right in the activation, alongside the parameters.
		result = resolve(executor.run_steps(function.body, frame))
		root.info("%s --> %r" % (name, result))
		return result
	except EngineError as ex:
		ex.backtrace.append(frame.breadcrumb.key())
		raise
	finally:
		root.leave()

def resolve(outcome:OUTCOME):
	"""
	An explicit return and a trailing expression both make a result.
	Falling off the end of a body gives UNIT, which is the type-checker's concern, not ours.
	"""
	if isinstance(outcome, (Returning, Completion)): return outcome.value
	raise ControlEscaped(outcome.kind)
