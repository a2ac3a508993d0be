"""
A pre-flight pass over a program, without running it.

The run-time does not depend on this. It catches the misplaced-control-flow and
bad-call problems that would otherwise show up as errors part-way through a run,
or not at all if the offending code never happens to execute. It also points out
steps that follow a return, break, or continue on every path, and so never run.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from .. import syntax
from ..diagnostics import Report

def check_program(program:syntax.Program, report:Report):
	checker, reach = WellFormed(program, report), Reach(report)
	for function in program.functions.values():
		checker.check_function(function)
		reach.check_function(function)

class WellFormed(Visitor):
	"""
	The extra argument to each visit is the kind of the innermost enclosing loop,
	or None outside of any loop. Function bodies start fresh at None.
	"""
	def __init__(self, program:syntax.Program, report:Report):
		self._program = program
		self._report = report
		self._function = None

	def check_function(self, function:syntax.Function):
		self._function = function
		self.visit(function.body, None)

	def visit_Block(self, block:syntax.Block, loop:Optional[str]):
		for step in block.steps:
			self.visit(step, loop)

	def visit_Let(self, stmt:syntax.Let, loop):
		if stmt.expr is not None:
			self.visit(stmt.expr, loop)

	def visit_Assign(self, stmt:syntax.Assign, loop):
		self.visit(stmt.expr, loop)

	def visit_ExprStmt(self, stmt:syntax.ExprStmt, loop):
		self.visit(stmt.expr, loop)

	def visit_IfThen(self, stmt:syntax.IfThen, loop):
		self.visit(stmt.cond, loop)
		self.visit(stmt.then_part, loop)
		if stmt.else_part is not None:
			self.visit(stmt.else_part, loop)

	def visit_Loop(self, stmt:syntax.Loop, loop):
		self.visit(stmt.body, "loop")

	def visit_WhileLoop(self, stmt:syntax.WhileLoop, loop):
		self.visit(stmt.cond, loop)
		self.visit(stmt.body, "while")

	def visit_ForRange(self, stmt:syntax.ForRange, loop):
		self.visit(stmt.lo, loop)
		self.visit(stmt.hi, loop)
		self.visit(stmt.body, "for")

	def visit_Break(self, stmt:syntax.Break, loop):
		if loop is None:
			self._report.misplaced_control(self._function, stmt)
		elif stmt.expr is not None and loop != "loop":
			self._report.break_value_outside_loop(self._function, stmt, loop)
		if stmt.expr is not None:
			self.visit(stmt.expr, loop)

	def visit_Continue(self, stmt:syntax.Continue, loop):
		if loop is None:
			self._report.misplaced_control(self._function, stmt)

	def visit_Return(self, stmt:syntax.Return, loop):
		if stmt.expr is not None:
			self.visit(stmt.expr, loop)

	def visit_Nothing(self, stmt:syntax.Nothing, loop): pass
	def visit_Literal(self, expr:syntax.Literal, loop): pass
	def visit_Lookup(self, expr:syntax.Lookup, loop): pass

	def visit_BinExp(self, expr:syntax.BinExp, loop):
		self.visit(expr.lhs, loop)
		self.visit(expr.rhs, loop)

	def visit_UnaryExp(self, expr:syntax.UnaryExp, loop):
		self.visit(expr.arg, loop)

	def visit_Call(self, expr:syntax.Call, loop):
		name = expr.callee.text
		if name not in self._program:
			self._report.undefined_function(self._function, expr)
		else:
			need, got = self._program[name].arity(), len(expr.args)
			if need != got:
				self._report.wrong_arity(self._function, expr, need, got)
		for a in expr.args:
			self.visit(a, loop)

class Reach(Visitor):
	"""
	Path coverage. Each visit answers how a statement finishes on every path through it:
	"return", "break", "continue", "jump" for a mix of those, or None if it might fall through.
	A step after one that never falls through can never run, so it gets reported.
	Loops are assumed to run their bodies zero or more times, except `loop`, which runs at least once.
	"""
	def __init__(self, report:Report):
		self._report = report
		self._function = None

	def check_function(self, function:syntax.Function):
		self._function = function
		self.visit(function.body)

	def visit_Block(self, block:syntax.Block):
		for i, step in enumerate(block.steps):
			way = self.visit(step)
			if way is not None:
				if i + 1 < len(block.steps):
					self._report.unreachable(self._function, block.steps[i + 1], step)
				return way

	def _operand(self, item):
		# An if or block in operand position diverts the statement that holds it.
		if isinstance(item, syntax.Statement): return self.visit(item)

	def visit_Let(self, stmt:syntax.Let):
		if stmt.expr is not None: return self._operand(stmt.expr)

	def visit_Assign(self, stmt:syntax.Assign): return self._operand(stmt.expr)
	def visit_ExprStmt(self, stmt:syntax.ExprStmt): return self._operand(stmt.expr)

	def visit_IfThen(self, stmt:syntax.IfThen):
		way = self._operand(stmt.cond)
		if way is not None: return way
		branches = [self.visit(stmt.then_part)]
		if stmt.else_part is None: return None
		branches.append(self.visit(stmt.else_part))
		if None in branches: return None
		return branches[0] if branches[0] == branches[1] else "jump"

	def visit_Loop(self, stmt:syntax.Loop):
		# Breaks and continues stay inside; only a sure return gets out.
		if self.visit(stmt.body) == "return": return "return"

	def visit_WhileLoop(self, stmt:syntax.WhileLoop):
		way = self._operand(stmt.cond)
		if way is not None: return way
		self.visit(stmt.body)

	def visit_ForRange(self, stmt:syntax.ForRange):
		way = self._operand(stmt.lo) or self._operand(stmt.hi)
		if way is not None: return way
		self.visit(stmt.body)

	def visit_Break(self, stmt:syntax.Break): return "break"
	def visit_Continue(self, stmt:syntax.Continue): return "continue"
	def visit_Return(self, stmt:syntax.Return): return "return"
	def visit_Nothing(self, stmt:syntax.Nothing): pass
