import numpy as np


class Base(object):
	""" Abstract linear operator approximating an inverse Hessian

	Subclasses implement `apply`, `update` and `reset`.  The operator is
	never formed explicitly; it only acts on vectors.
	"""
	def __init__(self, n):
		if n < 1:
			raise ValueError('operator dimension must be positive, got %d' % n)
		self.n = int(n)
		self.nprod = 0

	@property
	def shape(self):
		return (self.n, self.n)

	def apply(self, v, out=None):
		raise NotImplementedError("")

	def update(self, s, y):
		raise NotImplementedError("")

	def reset(self):
		raise NotImplementedError("")

	def __mul__(self, v):
		return self.apply(v)

	def _check(self, v):
		v = np.asarray(v, dtype=float).ravel()
		if v.size != self.n:
			raise ValueError('expected a vector of length %d, got %d' % (self.n, v.size))
		return v
