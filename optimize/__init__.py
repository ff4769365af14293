from .LBFGS import LBFGSSolver, lbfgs
from .line_search import LineModel, armijo_wolfe
from .optimizer import InverseLBFGSOperator
from .parameters import (AlgorithmicParameter, IntegerRange, RealInterval,
			default, find, lbfgs_parameters, update_parameter)
from .problem import FunctionProblem, Problem, quadratic, rosenbrock
from .stats import ExecutionStats, Status
from .tools import History, LogReporter, Writer
from .tuning import ParameterOptimizationProblem, minimize_with_scipy
