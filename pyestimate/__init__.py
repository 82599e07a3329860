"""
PyEstimate: small numerical estimation toolkit.

Submodules:
    interval: Random interval search for 1-D minimization
    regression: Linear models fit by optimization, with pairs-bootstrap covariance
    core: Shared exceptions, protocols, validation and optimizers
"""

__version__ = "0.1.0"

from pyestimate import interval
from pyestimate import regression
from pyestimate.interval import minimize_interval
from pyestimate.regression import fit_linear_bootstrap

__all__ = [
    "__version__",
    "interval",
    "regression",
    "minimize_interval",
    "fit_linear_bootstrap",
]
