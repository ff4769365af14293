import enum


class Status(enum.Enum):
	unknown = 'unknown'
	first_order = 'first_order'
	not_desc = 'not_desc'
	stalled = 'stalled'
	max_eval = 'max_eval'
	max_time = 'max_time'

	@property
	def message(self):
		return STATUS_MESSAGES[self]

STATUS_MESSAGES = {
	Status.unknown: 'unknown',
	Status.first_order: 'first-order stationary',
	Status.not_desc: 'not a descent direction',
	Status.stalled: 'stalled: line search failure',
	Status.max_eval: 'maximum number of function evaluations',
	Status.max_time: 'maximum elapsed time',
}


class ExecutionStats(object):
	""" Outcome of a solver run
	"""
	def __init__(self, status, problem, solution=None, objective=None,
				dual_feas=None, iter=0, elapsed_time=0., solver_specific=None):
		self.status = status
		self.problem_name = problem.name
		self.solution = solution
		self.objective = objective
		self.dual_feas = dual_feas
		self.iter = iter
		self.elapsed_time = elapsed_time
		self.neval_obj = problem.neval_obj
		self.neval_grad = problem.neval_grad
		self.solver_specific = solver_specific or {}

	@property
	def success(self):
		return self.status == Status.first_order

	def __str__(self):
		lines = [
			'Execution stats: %s' % self.status.message,
			'  problem: %s' % self.problem_name,
			'  objective value: %.6e' % self.objective,
			'  dual feasibility: %.6e' % self.dual_feas,
			'  iterations: %d' % self.iter,
			'  evaluations: obj %d, grad %d' % (self.neval_obj, self.neval_grad),
			'  elapsed time: %.3f s' % self.elapsed_time,
		]
		return '\n'.join(lines)
