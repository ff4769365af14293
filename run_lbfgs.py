import argparse, logging, os

from optimize import (LBFGSSolver, History, LogReporter, Writer,
			ParameterOptimizationProblem, minimize_with_scipy,
			lbfgs_parameters, quadratic, rosenbrock)
from optimize.tools import Tee

parser = argparse.ArgumentParser(description='L-BFGS with Armijo-Wolfe line search')
parser.add_argument('--problem', type=str, default='quadratic', choices=['quadratic', 'rosenbrock'],
			help='objective to minimize')
parser.add_argument('--nvar', type=int, default=2, help='number of variables (rosenbrock only)')
parser.add_argument('--mem', type=int, default=5, help='number of stored curvature pairs')
parser.add_argument('--tau1', type=float, default=0.99, help='slope factor of the Wolfe test')
parser.add_argument('--atol', type=float, default=1e-8, help='absolute gradient tolerance')
parser.add_argument('--rtol', type=float, default=1e-8, help='relative gradient tolerance')
parser.add_argument('--max-eval', type=int, default=-1, help='objective evaluation budget, <=0 for none')
parser.add_argument('--max-time', type=float, default=30., help='time budget in seconds')
parser.add_argument('--tune', type=int, default=0, help='tune mem and tau1 before solving')
parser.add_argument('--maxfev', type=int, default=30, help='solver runs allowed while tuning')
parser.add_argument('--odir', type=str, default='', help='directory for stat files and plot')
parser.add_argument('--verbose', action='store_true', help='log every iteration')


if __name__=='__main__':
	args = parser.parse_args()
	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
				format='%(asctime)s %(levelname)s %(name)s: %(message)s')

	if args.problem == 'quadratic':
		problem = quadratic()
	else:
		problem = rosenbrock(args.nvar)
	parameters = lbfgs_parameters(problem, mem=args.mem, tau1=args.tau1)
	solve_kwargs = dict(atol=args.atol, rtol=args.rtol,
				max_eval=args.max_eval, max_time=args.max_time)

	if args.tune:
		poptim = ParameterOptimizationProblem([problem], parameters, **solve_kwargs)
		result = minimize_with_scipy(poptim, maxfev=args.maxfev)
		logging.info('tuned parameters %s, cost %g', result.best, result.best_cost)

	history = History()
	reporters = [history, LogReporter()]
	if args.odir:
		reporters.append(Writer(os.path.join(args.odir, 'stat')))

	problem.reset_counters()
	solver = LBFGSSolver(problem, parameters, reporter=Tee(*reporters))
	stats = solver.solve(problem, **solve_kwargs)
	print(stats)

	if args.odir:
		from optimize.plot import plot_history
		plot_history(history, filename=os.path.join(args.odir, 'history.png'), title=problem.name)
