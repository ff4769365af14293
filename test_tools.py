import logging

import matplotlib
matplotlib.use('Agg')
import numpy as np

from optimize import History, LBFGSSolver, LogReporter, Writer, lbfgs_parameters, quadratic
from optimize.plot import plot_history
from optimize.tools import Tee, loadstat


def run(reporter):
	problem = quadratic()
	solver = LBFGSSolver(problem, lbfgs_parameters(problem), reporter=reporter)
	return solver.solve(problem)


def test_log_reporter_formats_rows(caplog):
	log = logging.getLogger('test.reporter')
	reporter = LogReporter(log)
	with caplog.at_level(logging.INFO, logger='test.reporter'):
		reporter.header()
		reporter.report(dict(iter=3, f=1.5, dual=0.25, slope=-2., bk=1))
		reporter.report(dict(iter=4, f=1.0, dual=0.125))
	header, row, last = [r.getMessage() for r in caplog.records]
	assert header.split() == ['iter', 'f(x)', '|g|', "g'd", 'bk']
	assert row.split() == ['3', '1.500e+00', '2.500e-01', '-2.000e+00', '1']
	assert last.split() == ['4', '1.000e+00', '1.250e-01']

def test_history_columns():
	history = History()
	stats = run(history)
	assert len(history) == stats.iter + 1
	assert np.isnan(history['slope'][-1])
	assert np.all(history['slope'][:-1] < 0)
	assert history['dual'][-1] == stats.dual_feas

def test_writer_appends_columns(tmp_path):
	writer = Writer(str(tmp_path / 'stat'))
	stats = run(writer)
	f = loadstat(str(tmp_path / 'stat'), 'f')
	bk = loadstat(str(tmp_path / 'stat'), 'bk')
	assert f.size == stats.iter + 1
	assert bk.size == stats.iter
	assert f[-1] == np.float64('%e' % stats.objective)

	# a second solve starts the files over
	run(writer)
	assert loadstat(str(tmp_path / 'stat'), 'f').size == f.size

def test_tee_and_plot(tmp_path):
	history = History()
	other = History()
	run(Tee(history, other))
	assert history.rows == other.rows
	filename = str(tmp_path / 'history.png')
	plot_history(history, filename=filename, title='quadratic')
	assert (tmp_path / 'history.png').exists()
