import pytest

from optimize import (AlgorithmicParameter, IntegerRange, RealInterval, default,
			find, lbfgs_parameters, quadratic, rosenbrock, update_parameter)


def test_find_and_default():
	params = [AlgorithmicParameter(3, IntegerRange(1, 10), 'mem'),
			AlgorithmicParameter(0.5, RealInterval(0., 1.), 'tau1')]
	assert find(params, 'tau1') is params[1]
	assert default(find(params, 'mem')) == 3
	with pytest.raises(KeyError):
		find(params, 'tau0')

def test_domains():
	r = IntegerRange(1, 4)
	assert 2 in r
	assert 5 not in r
	assert 2.5 not in r
	assert r.clip(9.7) == 4
	assert r.clip(2.6) == 3
	i = RealInterval(1e-4, 1.)
	assert 0.5 in i
	assert 0. not in i
	assert i.clip(3.) == 1.
	with pytest.raises(ValueError):
		IntegerRange(3, 1)
	with pytest.raises(ValueError):
		RealInterval(1., 0.)

def test_default_must_lie_in_domain():
	with pytest.raises(ValueError):
		AlgorithmicParameter(0, IntegerRange(1, 3), 'mem')

def test_update_parameter():
	p = AlgorithmicParameter(2, IntegerRange(1, 5), 'mem')
	assert update_parameter(p, 4.2) == 4
	assert p.value == 4
	assert p.default == 2
	with pytest.raises(ValueError):
		update_parameter(p, 6)
	assert p.value == 4
	p.reset()
	assert p.value == 2

def test_lbfgs_parameters():
	params = lbfgs_parameters(rosenbrock(8))
	mem = find(params, 'mem')
	tau1 = find(params, 'tau1')
	assert mem.value == 5
	assert (mem.domain.lower, mem.domain.upper) == (1, 8)
	assert tau1.value == 0.99
	assert 0. < tau1.domain.lower < tau1.domain.upper < 1.

	small = find(lbfgs_parameters(quadratic()), 'mem')
	assert small.value == 2
