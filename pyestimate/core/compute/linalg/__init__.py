"""
Linear algebra kernels for PyEstimate.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - Each operation returns a structured result dataclass
"""

from pyestimate.core.compute.linalg.qr import (
    LstsqResult,
    QRResult,
    qr_cpu,
    qr_lstsq_cpu,
)

__all__ = [
    "LstsqResult",
    "QRResult",
    "qr_cpu",
    "qr_lstsq_cpu",
]
