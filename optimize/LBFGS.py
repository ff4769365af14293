import logging
from time import time

import numpy as np
from .base import base
from .line_search import armijo_wolfe
from .math import angle, dot, norm
from .optimizer import InverseLBFGSOperator
from .parameters import default, find, lbfgs_parameters
from .stats import ExecutionStats, Status

logger = logging.getLogger(__name__)

EPS = np.finfo(float).eps


class LBFGSSolver(base):
	"""Limited memory BFGS algorithm

	The inverse Hessian memory is sized from the "mem" parameter when
	the solver is built; the Wolfe slope factor "tau1" is read at every
	line search, so it may change between solves.
	"""
	def __init__(self, problem, parameters, reporter=None, scaling=True, bk_max=25):
		super().__init__(problem, parameters, reporter=reporter)
		self.bk_max = bk_max
		memory = find(self.p, 'mem')
		if default(memory) > self.n:
			raise ValueError('L-BFGS memory %d exceeds the number of variables %d'
					% (default(memory), self.n))
		self.H = InverseLBFGSOperator(self.n, mem=default(memory), scaling=scaling)

	@property
	def name(self):
		return 'LBFGS'

	def solve(self, problem, x=None, atol=np.sqrt(EPS), rtol=np.sqrt(EPS),
			max_eval=-1, max_time=30., verbose=True):
		""" Minimizes problem from x (default: its initial point)

		Stops when |g| <= atol + rtol*|g0|, when more than max_eval
		objective evaluations were made (max_eval <= 0 disables the
		check), when max_time seconds have elapsed, or when no descent
		step can be found.
		"""
		self.setup(problem, x)
		start_time = time()
		elapsed_time = 0.

		x = self.x
		xt = self.xt
		gx = self.gx
		gt = self.gt
		d = self.d
		h = self.h
		H = self.H
		H.reset()

		f = problem.evaluate_objective(x)
		problem.evaluate_gradient(x, gx)

		gNorm = norm(gx)
		eps = atol + rtol * gNorm
		iter = 0
		nbk = nbW = 0

		reporter = self.get_reporter(verbose)
		if reporter is not None:
			reporter.header()

		optimal = gNorm <= eps
		too_many_evals = 0 < max_eval < problem.neval_obj
		too_slow = elapsed_time > max_time
		stalled = False
		status = Status.unknown

		while not (optimal or too_many_evals or too_slow or stalled):
			H.apply(gx, out=d)
			d *= -1.
			slope = dot(d, gx)
			if not slope < 0.:
				logger.error('not a descent direction: slope = %.3e, angle = %.1f deg',
						slope, np.degrees(angle(d, -gx)))
				status = Status.not_desc
				stalled = True
				continue

			tau1 = default(find(self.p, 'tau1'))
			t, good_grad, ft, nbk, nbW, ls_status = armijo_wolfe(
					h, f, slope, gt, tau1=tau1, bk_max=self.bk_max)

			if reporter is not None:
				reporter.report(dict(iter=iter, f=f, dual=gNorm, slope=slope, bk=nbk))

			if ls_status < 0:
				logger.warning('line search failed: %d backtracks, %d extrapolations',
						nbk, nbW)
				status = Status.stalled
				stalled = True
				continue

			np.multiply(d, t, out=xt)
			xt += x
			if not good_grad:
				problem.evaluate_gradient(xt, gt)

			# update L-BFGS approximation with s = t*d, y = gt - gx
			d *= t
			np.subtract(gt, gx, out=gx)
			H.update(d, gx)

			# move on
			x[:] = xt
			f = ft
			gx[:] = gt

			gNorm = norm(gx)
			iter += 1

			optimal = gNorm <= eps
			elapsed_time = time() - start_time
			too_many_evals = 0 < max_eval < problem.neval_obj
			too_slow = elapsed_time > max_time

		elapsed_time = time() - start_time
		if reporter is not None:
			reporter.report(dict(iter=iter, f=f, dual=gNorm))

		if optimal:
			status = Status.first_order
		elif too_many_evals:
			status = Status.max_eval
		elif too_slow:
			status = Status.max_time

		return ExecutionStats(
			status,
			problem,
			solution=x.copy(),
			objective=f,
			dual_feas=gNorm,
			iter=iter,
			elapsed_time=elapsed_time,
			solver_specific=dict(nbk=nbk, nbW=nbW),
		)


def lbfgs(problem, parameters=None, x=None, **kwargs):
	""" Builds an L-BFGS solver for problem and runs it once
	"""
	if parameters is None:
		parameters = lbfgs_parameters(problem)
	solver = LBFGSSolver(problem, parameters)
	return solver.solve(problem, x=x, **kwargs)
