"""
Shared compute infrastructure for PyEstimate.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    linalg: QR least squares
    optimization: Default ScalarOptimizer and result normalization
"""

from pyestimate.core.compute.timing import Timer

__all__ = [
    "Timer",
]
