from polyfit.errors import InvalidArgument
from polyfit.evaluate import evaluate, residuals
from polyfit.fitting import fit, vandermonde, weights_active
from polyfit.solvers import (
    DEFAULT_METHOD,
    ColPivQRSolver,
    JacobiSVDSolver,
    LeastSquaresSolver,
    get_solver,
)
