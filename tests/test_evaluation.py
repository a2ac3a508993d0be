import unittest

from rill.syntax import (
	Literal, Lookup, BinExp, UnaryExp, Call, truth, falsehood,
	Let, Assign, ExprStmt, Nothing, Block, IfThen, Loop, WhileLoop, ForRange,
	Break, Continue, Return, Parameter, Function, Program,
)
from rill.primitive import UNIT
from rill.stacking import RootFrame
from rill.tree_walker.executive import run_program
from rill.tree_walker.evaluator import execute, evaluate
from rill.tree_walker.outcome import Completion, Breaking, Continuing, Returning, NORMAL

def n(value): return Literal(value)
def v(name): return Lookup(name)
def add(a, b): return BinExp(a, "+", b)
def incr(name, by=1): return Assign(name, add(v(name), n(by)))

def _body(*steps, params=(), args=(), **kw):
	""" Run the steps as the body of a function `f`, and answer its result. """
	program = Program([Function("f", params, Block(steps))])
	return run_program(program, "f", args, **kw)

class OutcomeTests(unittest.TestCase):
	""" Executing statements directly, to see the outcomes themselves. """

	def setUp(self) -> None:
		self.frame = RootFrame({}).child()

	def test_outcomes_differ_by_kind(self):
		self.assertNotEqual(Completion(2), Returning(2))
		self.assertEqual(Breaking(2), Breaking(2))

	def test_simple_statements(self):
		self.assertEqual(NORMAL, execute(Let("a", n(1)), self.frame))
		self.assertEqual(NORMAL, execute(Nothing(), self.frame))
		self.assertEqual(Completion(1), execute(ExprStmt(v("a")), self.frame))
		self.assertEqual(Continuing(), execute(Continue(), self.frame))
		self.assertEqual(Breaking(None), execute(Break(), self.frame))
		self.assertEqual(Breaking(3), execute(Break(add(v("a"), n(2))), self.frame))
		self.assertEqual(Returning(UNIT), execute(Return(), self.frame))
		self.assertEqual(Returning(1), execute(Return(v("a")), self.frame))

	def test_block_stops_at_first_abnormal_outcome(self):
		self.frame.declare("a", 0, mutable=True)
		block = Block([incr("a"), IfThen(truth(), Block([Break()])), incr("a")])
		self.assertEqual(Breaking(None), execute(block, self.frame))
		self.assertEqual(1, self.frame.lookup("a"))

	def test_block_value_is_its_last_step(self):
		self.assertEqual(Completion(7), execute(Block([Let("x", n(7)), ExprStmt(v("x"))]), self.frame))
		self.assertEqual(NORMAL, execute(Block([ExprStmt(n(7)), Let("x", n(7))]), self.frame))
		self.assertEqual(NORMAL, execute(Block(), self.frame))

	def test_block_bindings_vanish_on_exit(self):
		execute(Block([Let("inner", n(1))]), self.frame)
		self.assertFalse(self.frame.holds("inner"))

	def test_bindings_vanish_on_abnormal_exit(self):
		self.assertEqual(NORMAL, execute(Loop(Block([Let("in_loop", n(1)), Break()])), self.frame))
		self.assertEqual(Returning(2), execute(Block([Let("in_block", n(2)), Return(v("in_block"))]), self.frame))
		self.assertEqual(Breaking(None), execute(Block([Let("in_break", n(3)), Break()]), self.frame))
		for name in ("in_loop", "in_block", "in_break"):
			self.assertFalse(self.frame.holds(name), name)

	def test_evaluate_if_as_an_operand(self):
		expr = add(n(1), IfThen(falsehood(), Block([ExprStmt(n(2))]), Block([ExprStmt(n(3))])))
		self.assertEqual(4, evaluate(expr, self.frame))

class ExpressionTests(unittest.TestCase):

	def test_arithmetic_and_precedence_by_tree(self):
		self.assertEqual(14, _body(ExprStmt(add(n(2), BinExp(n(3), "*", n(4))))))
		self.assertEqual(-5, _body(ExprStmt(UnaryExp("-", n(5)))))
		self.assertIs(False, _body(ExprStmt(UnaryExp("!", truth()))))

	def test_short_circuit(self):
		explosive = BinExp(BinExp(n(1), "/", n(0)), "==", n(0))
		self.assertIs(False, _body(ExprStmt(BinExp(falsehood(), "&&", explosive))))
		self.assertIs(True, _body(ExprStmt(BinExp(truth(), "||", explosive))))
		self.assertIs(True, _body(ExprStmt(BinExp(truth(), "&&", truth()))))

	def test_call_arguments_see_the_callers_variables(self):
		twice = Function("twice", [Parameter("x")], Block([ExprStmt(add(v("x"), v("x")))]))
		main = Function("main", [], Block([Let("k", n(21)), ExprStmt(Call("twice", [v("k")]))]))
		self.assertEqual(42, run_program(Program([twice, main])))

	def test_parameters_mutate_locally(self):
		bump = Function("bump", [Parameter("x", True)], Block([incr("x"), ExprStmt(v("x"))]))
		main = Function("main", [], Block([
			Let("k", n(1), mutable=True),
			Let("j", Call("bump", [v("k")])),
			ExprStmt(add(BinExp(v("k"), "*", n(10)), v("j"))),
		]))
		self.assertEqual(12, run_program(Program([bump, main])))

class StatementTests(unittest.TestCase):

	def test_shadowing_in_nested_block(self):
		self.assertEqual(1, _body(
			Let("a", n(1), mutable=True),
			Block([Let("a", n(5), mutable=True), incr("a")]),
			ExprStmt(v("a")),
		))

	def test_assignment_in_nested_block_reaches_outer(self):
		self.assertEqual(7, _body(
			Let("a", n(1), mutable=True),
			Block([Assign("a", n(7))]),
			ExprStmt(v("a")),
		))

	def test_let_shadows_in_the_same_block(self):
		self.assertEqual(2, _body(Let("a", n(1)), Let("a", add(v("a"), n(1))), ExprStmt(v("a"))))

	def test_else_if_chain(self):
		def classify(k):
			chain = IfThen(
				BinExp(v("k"), "<", n(0)), Block([ExprStmt(n(-1))]),
				IfThen(BinExp(v("k"), "==", n(0)), Block([ExprStmt(n(0))]), Block([ExprStmt(n(1))])),
			)
			return _body(ExprStmt(chain), params=[Parameter("k")], args=[k])
		self.assertEqual([-1, 0, 1], [classify(-5), classify(0), classify(5)])

	def test_if_without_else(self):
		self.assertIs(UNIT, _body(IfThen(falsehood(), Block([ExprStmt(n(1))]))))

	def test_loop_break_value(self):
		self.assertEqual(2, _body(ExprStmt(Loop(Block([Break(n(2))])))))
		self.assertIs(UNIT, _body(ExprStmt(Loop(Block([Break()])))))

	def test_break_in_nested_ifs_stops_at_the_loop(self):
		self.assertEqual(3, _body(
			Let("n", n(0), mutable=True),
			Loop(Block([
				incr("n"),
				IfThen(BinExp(v("n"), ">", n(2)), Block([IfThen(truth(), Block([Break()]))])),
			])),
			ExprStmt(v("n")),
		))

	def test_inner_break_leaves_outer_loop_running(self):
		self.assertEqual(3, _body(
			Let("total", n(0), mutable=True),
			ForRange("i", n(0), n(3), Block([Loop(Block([Break()])), incr("total")])),
			ExprStmt(v("total")),
		))

	def test_while(self):
		self.assertEqual(10, _body(
			Let("i", n(0), mutable=True),
			Let("sum", n(0), mutable=True),
			WhileLoop(BinExp(v("i"), "<", n(5)), Block([
				Assign("sum", add(v("sum"), v("i"))),
				incr("i"),
			])),
			ExprStmt(v("sum")),
		))

	def test_while_evaluates_to_unit(self):
		self.assertIs(UNIT, _body(ExprStmt(WhileLoop(falsehood(), Block()))))

	def test_for_with_continue_and_break(self):
		self.assertEqual(0 + 1 + 2 + 4 + 5, _body(
			Let("sum", n(0), mutable=True),
			ForRange("i", n(0), n(10), Block([
				IfThen(BinExp(v("i"), "==", n(3)), Block([Continue()])),
				IfThen(BinExp(v("i"), "==", n(6)), Block([Break()])),
				Assign("sum", add(v("sum"), v("i"))),
			])),
			ExprStmt(v("sum")),
		))

	def test_for_empty_ranges(self):
		for lo, hi in [(5, 5), (5, 2)]:
			with self.subTest(lo=lo, hi=hi):
				self.assertEqual(0, _body(
					Let("count", n(0), mutable=True),
					ForRange("i", n(lo), n(hi), Block([incr("count")])),
					ExprStmt(v("count")),
				))

	def test_for_bounds_are_evaluated_once(self):
		self.assertEqual(3, _body(
			Let("hi", n(3), mutable=True),
			Let("count", n(0), mutable=True),
			ForRange("i", n(0), v("hi"), Block([incr("hi"), incr("count")])),
			ExprStmt(v("count")),
		))

	def test_for_variable_is_fresh_each_time(self):
		self.assertEqual(10 + 11 + 12, _body(
			Let("sum", n(0), mutable=True),
			ForRange("i", n(0), n(3), Block([
				incr("i", 10),
				Assign("sum", add(v("sum"), v("i"))),
			]), mutable=True),
			ExprStmt(v("sum")),
		))

	def test_return_unwinds_nested_loops(self):
		self.assertEqual(400, _body(
			Loop(Block([
				WhileLoop(truth(), Block([
					ForRange("i", n(0), n(10), Block([
						IfThen(BinExp(v("i"), "==", n(4)), Block([Return(BinExp(v("i"), "*", n(100)))])),
					])),
				])),
			])),
		))

	def test_return_from_within_a_let_initializer(self):
		self.assertEqual(9, _body(
			Let("x", IfThen(truth(), Block([Return(n(9))]), Block([ExprStmt(n(1))]))),
			ExprStmt(v("x")),
		))

	def test_falling_off_the_end_gives_unit(self):
		self.assertIs(UNIT, _body(Let("a", n(1))))
		self.assertIs(UNIT, _body(Return()))

	def test_deferred_initialization(self):
		self.assertEqual(3, _body(
			Let("a"),
			IfThen(truth(), Block([Assign("a", n(3))]), Block([Assign("a", n(4))])),
			ExprStmt(v("a")),
		))
		self.assertEqual(2, _body(Let("a", None, mutable=True), Assign("a", n(1)), incr("a"), ExprStmt(v("a"))))

	def test_return_path_bindings_stay_in_the_callee(self):
		g = Function("g", [], Block([Let("x", n(5)), Block([Let("y", n(6)), Return(v("y"))])]))
		main = Function("main", [], Block([Let("x", n(1)), ExprStmt(add(Call("g"), v("x")))]))
		self.assertEqual(7, run_program(Program([g, main])))

	def test_tail_expression_after_explicit_steps(self):
		self.assertEqual(5, _body(Let("a", n(2)), ExprStmt(add(v("a"), n(3)))))


if __name__ == '__main__':
	unittest.main()
