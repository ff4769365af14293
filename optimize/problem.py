import abc

import numpy as np
from scipy import optimize


class Problem(abc.ABC):
	""" Smooth objective with gradient, seen through its evaluation oracle

	Concrete problems implement `obj` and `grad`; the public
	`evaluate_objective` and `evaluate_gradient` count every call in
	`neval_obj` and `neval_grad`.
	"""
	def __init__(self, x0, name='generic', minimize=True, lvar=None, uvar=None):
		self.x0 = np.array(x0, dtype=float).ravel()
		if self.x0.size == 0:
			raise ValueError('problem dimension must be positive')
		self.name = name
		self.minimize = minimize
		n = self.x0.size
		self.lvar = np.full(n, -np.inf) if lvar is None else np.broadcast_to(lvar, (n,)).astype(float)
		self.uvar = np.full(n, np.inf) if uvar is None else np.broadcast_to(uvar, (n,)).astype(float)
		self.neval_obj = 0
		self.neval_grad = 0

	@abc.abstractmethod
	def obj(self, x):
		pass

	@abc.abstractmethod
	def grad(self, x, out):
		pass

	def dimension(self):
		return self.x0.size

	def initial_point(self):
		return self.x0.copy()

	def is_minimization(self):
		return bool(self.minimize)

	def is_unconstrained(self):
		return bool(np.all(np.isneginf(self.lvar)) and np.all(np.isposinf(self.uvar)))

	def evaluate_objective(self, x):
		self.neval_obj += 1
		return float(self.obj(x))

	def evaluate_gradient(self, x, out):
		self.neval_grad += 1
		self.grad(x, out)
		return out

	def reset_counters(self):
		self.neval_obj = 0
		self.neval_grad = 0

	def __repr__(self):
		return '%s(%r, n=%d)' % (type(self).__name__, self.name, self.dimension())


class FunctionProblem(Problem):
	""" Problem built from plain callables

	`f(x)` returns the objective value and `grad(x)`, when given, the
	gradient.  Without `grad` the gradient is approximated by forward
	differences with step `epsilon`; those extra objective calls are
	made directly on `f` and are not counted in `neval_obj`.
	"""
	def __init__(self, f, x0, grad=None, epsilon=None, **kwargs):
		super(FunctionProblem, self).__init__(x0, **kwargs)
		self.f = f
		self.g = grad
		self.epsilon = np.sqrt(np.finfo(float).eps) if epsilon is None else epsilon

	def obj(self, x):
		return self.f(x)

	def grad(self, x, out):
		if self.g is None:
			out[:] = optimize.approx_fprime(x, self.f, self.epsilon)
		else:
			out[:] = np.ravel(self.g(x))
		return out


def quadratic():
	""" (x1 - 1)^2 + 4 (x2 - 1)^2 started at the origin
	"""
	weights = np.array([1., 4.])
	f = lambda x: float(np.dot(weights, (x - 1.)**2))
	g = lambda x: 2. * weights * (x - 1.)
	return FunctionProblem(f, np.zeros(2), g, name='(x1 - 1)^2 + 4(x2 - 1)^2')

def rosenbrock(n=2):
	""" Extended Rosenbrock function from the classic (-1.2, 1, ...) start
	"""
	if n < 2:
		raise ValueError('rosenbrock needs at least 2 variables, got %d' % n)
	x0 = np.ones(n)
	x0[::2] = -1.2
	return FunctionProblem(optimize.rosen, x0, optimize.rosen_der,
				name='rosenbrock(%d)' % n)
