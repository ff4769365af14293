import numpy as np
from .math import dot


class LineModel(object):
	""" Restriction of a problem to the ray x + t*d

	`x` and `d` are held by reference, so the model always sees the
	solver's current point and direction.  Nothing is cached: every call
	to `obj` or `grad` is a fresh evaluation.
	"""
	def __init__(self, problem, x, d):
		self.problem = problem
		self.x = x
		self.d = d
		self.xt = np.empty_like(x)
		# step at which the last gradient was evaluated
		self.t_grad = None

	def point(self, t):
		np.multiply(self.d, t, out=self.xt)
		self.xt += self.x
		return self.xt

	def obj(self, t):
		""" phi(t) = f(x + t*d)
		"""
		return self.problem.evaluate_objective(self.point(t))

	def grad(self, t, g):
		""" Fills g with the gradient at x + t*d and returns phi'(t)
		"""
		self.problem.evaluate_gradient(self.point(t), g)
		self.t_grad = t
		return dot(g, self.d)


def armijo_wolfe(h, f, slope, g, tau0=1.0e-4, tau1=0.9999, bk_max=25, t=1.):
	""" Bracketing line search for the Armijo and Wolfe conditions

	Looks for a step t with

		phi(t)  <= f + tau0 * t * slope      (sufficient decrease)
		phi'(t) >= tau1 * slope              (curvature)

	A step failing the first test becomes the upper end of the bracket, a
	step passing it but failing the second the lower end.  Without an
	upper end the step grows by 5, without a lower end it shrinks by 0.4,
	otherwise the bracket is bisected.  At most `bk_max` steps are tried.

	Returns t, good_grad, ft, nbk, nbW, status where ft = phi(t), nbk and
	nbW count backtracks and extrapolations, and good_grad tells whether
	g holds the gradient at the returned step.

		Status codes
			status > 0  : both conditions hold
			status < 0  : failed, t must not be used
	"""
	if not slope < 0.:
		raise ValueError('line search needs a descent direction, slope = %g' % slope)
	if not 0. < tau0 < tau1:
		raise ValueError('need 0 < tau0 < tau1, got tau0 = %g, tau1 = %g' % (tau0, tau1))

	h.t_grad = None
	nbk = 0
	nbW = 0
	lo = 0.
	hi = np.inf
	ft = f
	status = -1

	for _ in range(bk_max):
		ft = h.obj(t)
		if ft <= f + tau0 * t * slope:
			slope_t = h.grad(t, g)
			if slope_t >= tau1 * slope:
				status = 1
				break
			if np.isfinite(slope_t):
				lo = t
				nbW += 1
			else:
				hi = t
				nbk += 1
		else:
			# also taken when phi(t) is nan
			hi = t
			nbk += 1

		if np.isinf(hi):
			t = 5. * t
		elif lo == 0.:
			t = 0.4 * t
		else:
			t = 0.5 * (lo + hi)
			if not hi - lo > np.finfo(float).eps * hi:
				break

	good_grad = status > 0 and h.t_grad == t
	return t, good_grad, ft, nbk, nbW, status
