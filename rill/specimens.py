"""
Ready-built program trees, for the console front and for the tests.

There is no parser in this package, so these are put together by hand,
just as a parser would build them. The source each one stands for
appears in its docstring.
"""
from .syntax import (
	Literal, Lookup, BinExp, Call,
	Let, Assign, ExprStmt, Block, IfThen, Loop, WhileLoop, ForRange,
	Break, Continue, Return, Parameter, Function, Program,
)

def _n(value): return Literal(value)
def _v(name): return Lookup(name)

def foo4():
	"""
	fn foo4() -> i32 {
	    return loop { break 2 }
	}
	"""
	return Function("foo4", [], Block([
		Return(Loop(Block([Break(_n(2))]))),
	]))

def foo3():
	"""
	fn foo3() -> i32 {
	    let mut a = 1;
	    let mut b = if a > 1 { 1 } else { 2 };
	    while a >= 1 {
	        a = a - 1;
	        b = b / 1;
	    }
	    a = 4;
	    while a >= 1 {
	        if a >= 1 {
	            a = a - 1;
	            continue;
	        }
	        b = 10;
	    }
	    return b;
	}
	"""
	return Function("foo3", [], Block([
		Let("a", _n(1), mutable=True),
		Let("b", IfThen(
			BinExp(_v("a"), ">", _n(1)),
			Block([ExprStmt(_n(1))]),
			Block([ExprStmt(_n(2))]),
		), mutable=True),
		WhileLoop(BinExp(_v("a"), ">=", _n(1)), Block([
			Assign("a", BinExp(_v("a"), "-", _n(1))),
			Assign("b", BinExp(_v("b"), "/", _n(1))),
		])),
		Assign("a", _n(4)),
		WhileLoop(BinExp(_v("a"), ">=", _n(1)), Block([
			IfThen(BinExp(_v("a"), ">=", _n(1)), Block([
				Assign("a", BinExp(_v("a"), "-", _n(1))),
				Continue(),
			])),
			# Never reached: the guard above repeats the loop's own condition.
			Assign("b", _n(10)),
		])),
		Return(_v("b")),
	]))

def foo2():
	"""
	fn foo2() -> i32 {
	    let mut a = 1;
	    a = a * 4;
	    if a > 1 {
	        a = a + 1;
	    }
	    let mut b = 0;
	    for mut i in 1..a {
	        b = b + i;
	    }
	    b
	}
	"""
	return Function("foo2", [], Block([
		Let("a", _n(1), mutable=True),
		Assign("a", BinExp(_v("a"), "*", _n(4))),
		IfThen(BinExp(_v("a"), ">", _n(1)), Block([
			Assign("a", BinExp(_v("a"), "+", _n(1))),
		])),
		Let("b", _n(0), mutable=True),
		ForRange("i", _n(1), _v("a"), Block([
			Assign("b", BinExp(_v("b"), "+", _v("i"))),
		]), mutable=True),
		ExprStmt(_v("b")),
	]))

def foo():
	"""
	fn foo(mut a : i32, mut b : i32) -> i32 {
	    let mut c = a + b;
	    return a + b + c;
	}
	"""
	return Function("foo", [Parameter("a", True), Parameter("b", True)], Block([
		Let("c", BinExp(_v("a"), "+", _v("b")), mutable=True),
		Return(BinExp(BinExp(_v("a"), "+", _v("b")), "+", _v("c"))),
	]))

def main0():
	"""
	fn main0() -> i32 {
	    let mut a = 1;
	    let mut b = 2;
	    return foo(a, b) + foo2() + foo3() + foo4();
	}
	"""
	total = BinExp(BinExp(BinExp(
		Call("foo", [_v("a"), _v("b")]), "+", Call("foo2")), "+", Call("foo3")), "+", Call("foo4"))
	return Function("main0", [], Block([
		Let("a", _n(1), mutable=True),
		Let("b", _n(2), mutable=True),
		Return(total),
	]))

def all_in_one() -> Program:
	return Program([foo4(), foo3(), foo2(), foo(), main0()])

def factorial() -> Program:
	"""
	fn fact(n : i32) -> i32 {
	    if n <= 1 { 1 } else { n * fact(n - 1) }
	}
	"""
	return Program([Function("fact", [Parameter("n")], Block([
		IfThen(
			BinExp(_v("n"), "<=", _n(1)),
			Block([ExprStmt(_n(1))]),
			Block([ExprStmt(BinExp(_v("n"), "*", Call("fact", [BinExp(_v("n"), "-", _n(1))])))]),
		),
	]))])

def first_square_over() -> Program:
	"""
	fn first_square_over(limit : i32) -> i32 {
	    let mut i = 0;
	    loop {
	        i = i + 1;
	        if i * i > limit { break i * i }
	    }
	}
	"""
	return Program([Function("first_square_over", [Parameter("limit")], Block([
		Let("i", _n(0), mutable=True),
		Loop(Block([
			Assign("i", BinExp(_v("i"), "+", _n(1))),
			IfThen(BinExp(BinExp(_v("i"), "*", _v("i")), ">", _v("limit")), Block([
				Break(BinExp(_v("i"), "*", _v("i"))),
			])),
		])),
	]))])

def spin() -> Program:
	"""
	fn spin() -> i32 { loop { } }
	"""
	return Program([Function("spin", [], Block([Loop(Block())]))])

# name -> (builder, default entry point)
SPECIMENS = {
	"all_in_one": (all_in_one, "main0"),
	"factorial": (factorial, "fact"),
	"first_square_over": (first_square_over, "first_square_over"),
	"spin": (spin, "spin"),
}
