"""Site percolation grid and threshold estimation."""

from .grid import Percolation
from .stats import PercolationStats, estimate_threshold, run_sweep

__all__ = ['Percolation', 'PercolationStats', 'estimate_threshold', 'run_sweep']
