import sys
from typing import Any, Sequence

from .ontology import Phrase
from .faults import EngineError
from . import syntax

class TooManyIssues(Exception):
	pass

class Report:
	""" Collects whatever the checker or the run-time has to complain about. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self): return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message=""):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(("Drat! " + message).rstrip())

	# Methods the well-formedness check calls:

	def misplaced_control(self, function:syntax.Function, guilty:Phrase):
		intro = "This can only appear inside a loop."
		self.issue(Pic(intro, [Annotation(function, guilty)]))

	def break_value_outside_loop(self, function:syntax.Function, guilty:syntax.Break, kind:str):
		intro = "Only `loop` can break with a value. This is inside a `%s` loop." % kind
		self.issue(Pic(intro, [Annotation(function, guilty)]))

	def unreachable(self, function:syntax.Function, guilty:syntax.Statement, jump:syntax.Statement):
		intro = "This can never run: the step before it never finishes normally."
		self.issue(Pic(intro, [Annotation(function, guilty), Annotation(function, jump, "control leaves here")]))

	def undefined_function(self, function:syntax.Function, guilty:syntax.Call):
		intro = "There is no function called %r." % guilty.callee.text
		self.issue(Pic(intro, [Annotation(function, guilty)]))

	def wrong_arity(self, function:syntax.Function, site:syntax.Call, need:int, got:int):
		plural = '' if need == 1 else 's'
		intro = "%s takes %d argument%s, but got %d instead." % (site.callee.text, need, plural, got)
		self.issue(Pic(intro, [Annotation(function, site)]))

	# Methods the console front calls:

	def runtime_fault(self, ex:EngineError):
		intro = "The program came to grief: " + ex.describe()
		footer = ["Called from %s" % name for name in ex.backtrace]
		self.issue(Pic(intro, [], footer))

class Annotation:
	""" Points at a node within some function. There is no source text to quote, so show the tree. """
	def __init__(self, function:syntax.Function, node:Any, caption:str=""):
		self.where = function.nom.text
		self.node = node
		self.caption = caption

	def illustrate(self):
		text = "  in %s: %s" % (self.where, self.node)
		if isinstance(self.node, Phrase) and self.node.left():
			left, right = self.node.span()
			text += "  (at %d)" % left if left == right else "  (at %d-%d)" % (left, right)
		return text + ("  -- " + self.caption if self.caption else "")

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer:Sequence[str]=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def description(self): return self._intro
	def as_text(self):
		lines = [self._intro]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	if issues:
		print("*"*60, file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
