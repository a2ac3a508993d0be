"""
These most-fundamental classes in the syntax class hierarchy
are separate from the rest to avoid various circular-import
scenarios. The parser (which lives elsewhere) builds the tree
out of these, and the run-time only ever reads it.
"""

class Phrase:
	""" Anything that came from somewhere in the source text. """
	spot: int = 0  # zero-spot means a tree built by hand.
	def left(self) -> int: return self.spot
	def right(self) -> int: return self.spot
	def span(self) -> tuple[int, int]: return self.left(), self.right()

class Nom(Phrase):
	""" Representing the occurrence of a name anywhere. """
	def __init__(self, text, spot=None):
		assert isinstance(text, str)
		assert isinstance(spot, int) or spot is None, type(spot)
		self.text, self.spot = text, spot or 0
	def __repr__(self): return "<Name %r>" % self.text
	def key(self): return self.text

class Symbol(Phrase):
	"""
	Any named-and-defined thing: functions and parameters, for now.
	"""
	nom: Nom

	def __init__(self, nom:Nom):
		assert isinstance(nom, Nom), type(nom)
		self.nom = nom
	def __repr__(self): return "{%s:%s}" % (self.nom.text, type(self).__name__)
	def key(self): return self.nom.key()
	def left(self): return self.nom.left()
	def right(self): return self.nom.right()

class ValueExpression(Phrase):
	""" Computes a value. Cannot, by itself, break, continue, or return. """

class Statement(Phrase):
	""" Executes for a control outcome, which may carry a value. """

def as_nom(name) -> Nom:
	return name if isinstance(name, Nom) else Nom(name)
