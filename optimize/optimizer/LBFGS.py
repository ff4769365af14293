import logging

import numpy as np
from ..math import dot
from .base import Base

logger = logging.getLogger(__name__)


class InverseLBFGSOperator(Base):
	""" Limited-memory BFGS approximation to the inverse Hessian

	At most `mem` curvature pairs (s, y) are kept, newest in column 0 of
	S and Y.  Once the memory is full the oldest pair is discarded.  The
	product with a vector is computed by the two-loop recursion in
	O(mem*n) operations.

	With `scaling` enabled the initial matrix is gamma*I, where
	gamma = y's/y'y is taken from the most recently accepted pair
	(scaling M3 proposed by Liu and Nocedal 1989).  Otherwise gamma = 1.
	"""
	def __init__(self, n, mem=5, scaling=True):
		super(InverseLBFGSOperator, self).__init__(n)
		if mem < 1:
			raise ValueError('L-BFGS memory must be at least 1, got %d' % mem)
		self.mem = int(mem)
		self.scaling = scaling

		self.S = np.zeros((self.n, self.mem))
		self.Y = np.zeros((self.n, self.mem))
		self.ys = np.zeros(self.mem)
		# multipliers of the first loop, reused across products
		self.al = np.zeros(self.mem)

		self.memory_used = 0
		self.gamma = 1.

	@property
	def npairs(self):
		return self.memory_used

	def pairs(self):
		""" Returns the stored (s, y) pairs, oldest first
		"""
		return [(self.S[:, ii].copy(), self.Y[:, ii].copy())
				for ii in range(self.memory_used-1, -1, -1)]

	def update(self, s, y):
		""" Update L-BFGS history with a new curvature pair

		Pairs with y's <= 0 would destroy positive definiteness; they are
		skipped and the operator is left untouched.  Returns whether the
		pair was stored.
		"""
		s = self._check(s)
		y = self._check(y)
		ys = dot(y, s)
		yy = dot(y, y)
		if not (np.isfinite(ys) and np.isfinite(yy)) or ys <= 0.:
			logger.debug('Not accepting L-BFGS update: ys = %g', ys)
			return False

		self.S[:, 1:] = self.S[:, :-1]
		self.Y[:, 1:] = self.Y[:, :-1]
		self.ys[1:] = self.ys[:-1]
		self.S[:, 0] = s
		self.Y[:, 0] = y
		self.ys[0] = ys
		if self.memory_used < self.mem:
			self.memory_used += 1

		if self.scaling:
			self.gamma = ys / yy
		return True

	def apply(self, v, out=None):
		""" Applies L-BFGS inverse Hessian to given vector
		"""
		self.nprod += 1
		q = self._check(v).copy()
		kk = self.memory_used
		al = self.al

		# first matrix product, newest pair first
		for ii in range(kk):
			al[ii] = dot(self.S[:, ii], q) / self.ys[ii]
			q -= al[ii] * self.Y[:, ii]

		r = q
		r *= self.gamma
		# second matrix product, oldest pair first
		for ii in range(kk-1, -1, -1):
			be = dot(self.Y[:, ii], r) / self.ys[ii]
			r += (al[ii] - be) * self.S[:, ii]

		if out is None:
			return r
		out[:] = r
		return out

	def reset(self):
		""" Discards history and returns to the identity
		"""
		self.memory_used = 0
		self.gamma = 1.
		self.S[:] = 0.
		self.Y[:] = 0.
		self.ys[:] = 0.
