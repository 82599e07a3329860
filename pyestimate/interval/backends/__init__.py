"""
Interval search backends.

Available backends:
    CPUIntervalBackend: random bracket narrowing on the CPU
"""

from pyestimate.interval.backends.cpu import CPUIntervalBackend

__all__ = [
    "CPUIntervalBackend",
]
