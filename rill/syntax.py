"""
The set of tree-nodes in simple form.
The (external) parser calls these constructors with subordinate semantic-values
in a bottom-up tree transduction. After that, nothing modifies them.

Names may be given either as plain strings or as `Nom` objects;
a parser will want to pass `Nom` so that spots survive.
"""
from typing import Optional, Sequence, Union
from .ontology import Nom, Symbol, ValueExpression, Statement, as_nom
from .faults import DuplicateFunction

OPERAND = Union[ValueExpression, Statement]

###############################################################################
# Expressions

class Literal(ValueExpression):
	def __init__(self, value: Union[int, bool], spot: int = None):
		assert isinstance(value, int), type(value)
		self.value, self.spot = value, spot or 0
	def __str__(self): return "<Literal %r>" % self.value

def truth(spot=None): return Literal(True, spot)
def falsehood(spot=None): return Literal(False, spot)

class Lookup(ValueExpression):
	def __init__(self, name):
		self.nom = as_nom(name)
		self.spot = self.nom.spot
	def __str__(self): return self.nom.text

class BinExp(ValueExpression):
	def __init__(self, lhs: OPERAND, op: str, rhs: OPERAND):
		self.lhs, self.op, self.rhs = lhs, op, rhs
	def __str__(self): return "(%s %s %s)" % (self.lhs, self.op, self.rhs)
	def left(self): return self.lhs.left()
	def right(self): return self.rhs.right()

class UnaryExp(ValueExpression):
	def __init__(self, op: str, arg: OPERAND):
		self.op, self.arg = op, arg
	def __str__(self): return "%s%s" % (self.op, self.arg)
	def right(self): return self.arg.right()

class Call(ValueExpression):
	def __init__(self, callee, args: Sequence[OPERAND] = ()):
		self.callee = as_nom(callee)
		self.args = tuple(args)
		self.spot = self.callee.spot
	def __str__(self): return "%s(%s)" % (self.callee.text, ", ".join(map(str, self.args)))

###############################################################################
# Statements

class Let(Statement):
	""" Without an initializer, the variable must be assigned before it is read. """
	def __init__(self, name, expr: Optional[OPERAND] = None, mutable: bool = False):
		self.nom = as_nom(name)
		self.expr, self.mutable = expr, mutable
		self.spot = self.nom.spot
	def __str__(self):
		text = "let %s%s" % ("mut " if self.mutable else "", self.nom.text)
		return text if self.expr is None else "%s = %s" % (text, self.expr)

class Assign(Statement):
	def __init__(self, name, expr: OPERAND):
		self.nom = as_nom(name)
		self.expr = expr
		self.spot = self.nom.spot
	def __str__(self): return "%s = %s" % (self.nom.text, self.expr)

class ExprStmt(Statement):
	""" A bare expression. As the last step of a block, it gives that block a value. """
	def __init__(self, expr: OPERAND):
		self.expr = expr
	def __str__(self): return str(self.expr)
	def left(self): return self.expr.left()
	def right(self): return self.expr.right()

class Nothing(Statement):
	""" The null statement: a stray semicolon. """
	def __str__(self): return ";"

class Block(Statement):
	def __init__(self, steps: Sequence[Statement] = ()):
		self.steps = tuple(steps)
		for s in self.steps: assert isinstance(s, Statement), s
	def __str__(self): return "{ %s }" % "; ".join(map(str, self.steps))

class IfThen(Statement):
	"""
	The else-part may be a block, another IfThen (for else-if chains), or absent.
	Used as an expression, the selected branch's value is the value of the whole.
	"""
	def __init__(self, cond: OPERAND, then_part: Block, else_part: Optional[Union[Block, "IfThen"]] = None):
		assert isinstance(then_part, Block), type(then_part)
		assert else_part is None or isinstance(else_part, (Block, IfThen)), type(else_part)
		self.cond, self.then_part, self.else_part = cond, then_part, else_part
	def __str__(self):
		text = "if %s %s" % (self.cond, self.then_part)
		return text if self.else_part is None else "%s else %s" % (text, self.else_part)

class Loop(Statement):
	""" The unconditional loop. Only this kind can break with a value. """
	def __init__(self, body: Block):
		self.body = body
	def __str__(self): return "loop %s" % self.body

class WhileLoop(Statement):
	def __init__(self, cond: OPERAND, body: Block):
		self.cond, self.body = cond, body
	def __str__(self): return "while %s %s" % (self.cond, self.body)

class ForRange(Statement):
	""" for name in lo..hi { body } -- hi is exclusive. """
	def __init__(self, name, lo: OPERAND, hi: OPERAND, body: Block, mutable: bool = False):
		self.nom = as_nom(name)
		self.lo, self.hi, self.body, self.mutable = lo, hi, body, mutable
		self.spot = self.nom.spot
	def __str__(self): return "for %s in %s..%s %s" % (self.nom.text, self.lo, self.hi, self.body)

class Break(Statement):
	def __init__(self, expr: Optional[OPERAND] = None, spot: int = None):
		self.expr, self.spot = expr, spot or 0
	def __str__(self): return "break" if self.expr is None else "break %s" % self.expr

class Continue(Statement):
	def __init__(self, spot: int = None):
		self.spot = spot or 0
	def __str__(self): return "continue"

class Return(Statement):
	def __init__(self, expr: Optional[OPERAND] = None, spot: int = None):
		self.expr, self.spot = expr, spot or 0
	def __str__(self): return "return" if self.expr is None else "return %s" % self.expr

###############################################################################
# Definitions

class Parameter(Symbol):
	def __init__(self, name, mutable: bool = False):
		super().__init__(as_nom(name))
		self.mutable = mutable
	def __repr__(self): return "<:%s%s>" % ("mut " if self.mutable else "", self.nom.text)

class Function(Symbol):
	params: tuple[Parameter, ...]
	body: Block

	def __init__(self, name, params: Sequence[Parameter], body: Block):
		super().__init__(as_nom(name))
		assert isinstance(body, Block), type(body)
		self.params = tuple(params)
		self.body = body

	def arity(self): return len(self.params)

	def __repr__(self):
		p = ", ".join(map(repr, self.params))
		return "{fn|%s(%s)}" % (self.nom.text, p)

class Program:
	""" Top-level definitions, by name. """
	functions: dict[str, Function]

	def __init__(self, functions: Sequence[Function]):
		self.functions = {}
		for fn in functions:
			key = fn.key()
			if key in self.functions:
				raise DuplicateFunction(key)
			self.functions[key] = fn

	def __contains__(self, name: str): return name in self.functions
	def __getitem__(self, name: str) -> Function: return self.functions[name]
