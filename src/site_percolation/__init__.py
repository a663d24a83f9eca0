"""
Site Percolation - incremental connectivity for N-by-N percolation systems.

This package provides tools for:
- Weighted quick-union connectivity over integer labels
- Site percolation grids with backwash-free fullness queries
- Monte-Carlo estimation of the percolation threshold
"""

__version__ = "1.0.0"
