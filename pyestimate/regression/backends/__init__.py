"""
Regression backends.

Available backends:
    CPUPairsBootstrapBackend: optimizer-based fit with pairs-bootstrap covariance
"""

from pyestimate.regression.backends.cpu import CPUPairsBootstrapBackend

__all__ = [
    "CPUPairsBootstrapBackend",
]
