""" Named algorithmic parameters with bounded domains

A solver reads its tunable constants from a list of
`AlgorithmicParameter`, looked up by name.  The tuning loop in
`optimize.tuning` changes their values between solver runs.
"""
import numbers

import numpy as np


class IntegerRange(object):
	""" Integers in [lower, upper]
	"""
	def __init__(self, lower, upper):
		if lower > upper:
			raise ValueError('empty integer range [%d, %d]' % (lower, upper))
		self.lower = int(lower)
		self.upper = int(upper)

	def __contains__(self, value):
		return isinstance(value, numbers.Integral) and self.lower <= value <= self.upper

	def coerce(self, value):
		return int(round(value))

	def clip(self, value):
		return int(np.clip(self.coerce(value), self.lower, self.upper))

	def __repr__(self):
		return 'IntegerRange(%d, %d)' % (self.lower, self.upper)


class RealInterval(object):
	""" Reals in [lower, upper]
	"""
	def __init__(self, lower, upper):
		if lower > upper:
			raise ValueError('empty interval [%g, %g]' % (lower, upper))
		self.lower = float(lower)
		self.upper = float(upper)

	def __contains__(self, value):
		return isinstance(value, numbers.Real) and self.lower <= value <= self.upper

	def coerce(self, value):
		return float(value)

	def clip(self, value):
		return float(np.clip(value, self.lower, self.upper))

	def __repr__(self):
		return 'RealInterval(%g, %g)' % (self.lower, self.upper)


class AlgorithmicParameter(object):
	""" A named value living in a domain

	`default` is the value the parameter was declared with, `value` the
	one solvers currently read.
	"""
	def __init__(self, default, domain, name):
		if default not in domain:
			raise ValueError('default %r of parameter %r is outside %r' % (default, name, domain))
		self.default = default
		self.domain = domain
		self.name = name
		self.value = default

	def reset(self):
		self.value = self.default

	def __repr__(self):
		return 'AlgorithmicParameter(%r, %r, %r)' % (self.value, self.domain, self.name)


def find(parameters, name):
	""" Look up a parameter by name
	"""
	for p in parameters:
		if p.name == name:
			return p
	raise KeyError('no parameter named %r' % name)

def default(parameter):
	""" Current value of a parameter
	"""
	return parameter.value

def update_parameter(parameter, value):
	value = parameter.domain.coerce(value)
	if value not in parameter.domain:
		raise ValueError('value %r of parameter %r is outside %r' % (value, parameter.name, parameter.domain))
	parameter.value = value
	return value

def lbfgs_parameters(problem, mem=5, tau1=0.99):
	""" Tunable parameters of the L-BFGS solver

	mem  -- number of curvature pairs kept by the inverse Hessian
	tau1 -- slope factor of the Wolfe curvature test
	"""
	n = problem.dimension()
	return [
		AlgorithmicParameter(min(mem, n), IntegerRange(1, n), 'mem'),
		AlgorithmicParameter(float(tau1), RealInterval(1.0e-4, 0.9999), 'tau1'),
	]
