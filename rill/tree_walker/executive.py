"""
The overall control for the run-time: pick an entry point, and call it.

Each run gets its own root frame, so separate runs share nothing
and may proceed side by side without any locking.
"""
from typing import Sequence
from .. import syntax
from ..diagnostics import Report
from ..stacking import RootFrame
from . import evaluator  # NOQA: installs the dispatch tables.
from .values import call

def run_program(
		program:syntax.Program,
		entry:str="main",
		args:Sequence=(),
		*,
		report:Report=None,
		step_limit:int=None,
		depth_limit:int=None,
):
	"""
	Answer the entry function's result, or raise an EngineError.
	Nothing partial is ever returned.
	"""
	root = RootFrame(program.functions, report=report, step_limit=step_limit, depth_limit=depth_limit)
	function = root.function(entry)
	result = call(function, tuple(args), root)
	root.info("%d steps" % root.steps)
	return result
