from .base import Base
from .LBFGS import InverseLBFGSOperator
