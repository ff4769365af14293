import numpy as np
from .line_search import LineModel
from .tools import LogReporter


class base(object):
	""" Solver state for line-search methods

	Owns every per-iteration buffer for one problem size, so that a
	solver can be reused across solves without reallocating.  A state
	must not be shared by concurrent solves.

	Variables
		x  - current point
		xt - trial point
		gx - gradient at x
		gt - gradient at xt
		d  - search direction, then the accepted step t*d
		h  - line model along d from x
		p  - algorithmic parameters
	"""
	def __init__(self, problem, parameters, reporter=None):
		self.n = problem.dimension()
		self.p = parameters
		self.reporter = reporter

		self.x = np.zeros(self.n)
		self.xt = np.zeros(self.n)
		self.gx = np.zeros(self.n)
		self.gt = np.zeros(self.n)
		self.d = np.zeros(self.n)
		self.h = LineModel(problem, self.x, self.d)

	@property
	def name(self):
		raise NotImplementedError("")

	def setup(self, problem, x=None):
		""" Checks the problem and loads the starting point into x
		"""
		if not problem.is_minimization():
			raise ValueError('%s only works for minimization problems' % self.name)
		if not problem.is_unconstrained():
			raise ValueError('%s should only be called for unconstrained problems' % self.name)
		if problem.dimension() != self.n:
			raise ValueError('solver was built for %d variables, problem has %d'
					% (self.n, problem.dimension()))

		x = problem.initial_point() if x is None else np.asarray(x, dtype=float).ravel()
		if x.size != self.n:
			raise ValueError('starting point has %d entries, expected %d' % (x.size, self.n))
		self.x[:] = x
		self.h.problem = problem

	def get_reporter(self, verbose):
		if self.reporter is not None:
			return self.reporter
		if verbose:
			return LogReporter()
		return None
