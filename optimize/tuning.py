""" Blackbox tuning of solver parameters

A full solver run over a set of problems is the evaluation function;
its cost is the number of objective and gradient evaluations spent,
plus a penalty for every problem the solver failed to solve.  The
search over parameter space is delegated to scipy's Nelder-Mead with
bounds taken from the parameter domains.
"""
import logging

import numpy as np
from scipy import optimize

from .LBFGS import LBFGSSolver
from .parameters import find, update_parameter

logger = logging.getLogger(__name__)


class ParameterOptimizationProblem(object):
	""" Solver cost as a function of its algorithmic parameters
	"""
	def __init__(self, problems, parameters, names=None, solver=LBFGSSolver,
				failure_penalty=1000., **solve_kwargs):
		self.problems = list(problems)
		self.parameters = parameters
		names = names or [p.name for p in parameters]
		self.tuned = [find(parameters, name) for name in names]
		smallest = min(problem.dimension() for problem in self.problems)
		for p in self.tuned:
			if p.name == 'mem' and p.domain.upper > smallest:
				raise ValueError('mem may reach %d but the smallest problem has %d variables'
						% (p.domain.upper, smallest))
		self.solver = solver
		self.failure_penalty = failure_penalty
		self.solve_kwargs = dict(verbose=False)
		self.solve_kwargs.update(solve_kwargs)
		self.history = []

	@property
	def bounds(self):
		return [(p.domain.lower, p.domain.upper) for p in self.tuned]

	def values(self):
		return [p.value for p in self.tuned]

	def set_values(self, values):
		for p, val in zip(self.tuned, values):
			update_parameter(p, p.domain.clip(val))

	def cost(self, stats):
		cost = stats.neval_obj + stats.neval_grad
		if not stats.success:
			cost += self.failure_penalty
		return cost

	def __call__(self, values):
		self.set_values(values)
		total = 0.
		for problem in self.problems:
			problem.reset_counters()
			# "mem" is consumed at construction, so every run gets a new solver
			solver = self.solver(problem, self.parameters)
			stats = solver.solve(problem, **self.solve_kwargs)
			total += self.cost(stats)
		self.history.append((self.values(), total))
		logger.info('evaluation %d: %s -> %g', len(self.history),
				', '.join('%s=%s' % (p.name, p.value) for p in self.tuned), total)
		return total

	def best(self):
		return min(self.history, key=lambda item: item[1])


def initial_simplex(x0, bounds, fraction=0.25):
	""" Simplex around x0 with edges a fraction of each domain width
	"""
	x0 = np.asarray(x0, dtype=float)
	simplex = np.tile(x0, (x0.size + 1, 1))
	for i, (lower, upper) in enumerate(bounds):
		step = fraction * (upper - lower)
		if x0[i] + step <= upper:
			simplex[i + 1, i] += step
		else:
			simplex[i + 1, i] -= step
	return simplex

def minimize_with_scipy(poptim, maxfev=50, **options):
	""" Tunes the parameters of poptim in place

	The parameters are left at the best values seen.  The scipy result
	is returned with two extra fields: `best`, a dict of parameter
	values, and `best_cost`.
	"""
	x0 = np.array(poptim.values(), dtype=float)
	bounds = poptim.bounds
	opts = dict(maxfev=maxfev, initial_simplex=initial_simplex(x0, bounds))
	opts.update(options)
	result = optimize.minimize(poptim, x0, method='Nelder-Mead', bounds=bounds, options=opts)

	values, cost = poptim.best()
	poptim.set_values(values)
	result.best = dict((p.name, p.value) for p in poptim.tuned)
	result.best_cost = cost
	return result
