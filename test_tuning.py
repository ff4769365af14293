import numpy as np
import pytest

from optimize import (ParameterOptimizationProblem, find, lbfgs_parameters,
			minimize_with_scipy, rosenbrock)
from optimize.tuning import initial_simplex


def test_cost_is_evaluation_count():
	problem = rosenbrock(2)
	params = lbfgs_parameters(problem)
	poptim = ParameterOptimizationProblem([problem], params)
	cost = poptim([2, 0.9])
	assert cost == problem.neval_obj + problem.neval_grad
	assert poptim.values() == [2, 0.9]
	assert len(poptim.history) == 1

def test_failures_are_penalized():
	problem = rosenbrock(2)
	params = lbfgs_parameters(problem)
	poptim = ParameterOptimizationProblem([problem], params, failure_penalty=1e6, max_eval=3)
	assert poptim(poptim.values()) > 1e6

def test_values_are_clipped_to_domains():
	problem = rosenbrock(3)
	params = lbfgs_parameters(problem)
	poptim = ParameterOptimizationProblem([problem], params)
	poptim.set_values([7.4, 2.])
	assert find(params, 'mem').value == 3
	assert find(params, 'tau1').value == find(params, 'tau1').domain.upper

def test_initial_simplex_stays_in_bounds():
	bounds = [(1, 4), (1e-4, 0.9999)]
	simplex = initial_simplex([4., 0.5], bounds)
	assert simplex.shape == (3, 2)
	for i, (lower, upper) in enumerate(bounds):
		assert np.all(simplex[:, i] >= lower)
		assert np.all(simplex[:, i] <= upper)
	np.testing.assert_array_equal(simplex[0], [4., 0.5])

def test_tuning_never_worsens_starting_cost():
	problems = [rosenbrock(2), rosenbrock(4)]
	params = lbfgs_parameters(problems[0])
	poptim = ParameterOptimizationProblem(problems, params, names=['mem', 'tau1'])
	assert find(params, 'mem').domain.upper == 2
	result = minimize_with_scipy(poptim, maxfev=12)
	start_cost = poptim.history[0][1]
	assert result.best_cost <= start_cost
	assert result.best_cost == min(cost for _, cost in poptim.history)
	assert result.best == {'mem': find(params, 'mem').value,
						'tau1': find(params, 'tau1').value}

def test_memory_domain_must_fit_every_problem():
	problems = [rosenbrock(2), rosenbrock(4)]
	with pytest.raises(ValueError):
		ParameterOptimizationProblem(problems, lbfgs_parameters(problems[1]))
	ParameterOptimizationProblem(problems, lbfgs_parameters(problems[0]), names=['tau1'])
