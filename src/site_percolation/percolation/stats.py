"""
Monte-Carlo estimation of the site percolation threshold.

Each trial opens uniformly random sites of a fresh grid until it percolates
and records the fraction of open sites at that moment.
"""

import logging
import numbers
import time
from typing import Dict, Iterable, Optional

import numpy as np
import pandas as pd
from scipy import stats

from .grid import Percolation

logger = logging.getLogger(__name__)


def estimate_threshold(n: int, rng: np.random.Generator) -> float:
    """
    Run a single percolation trial.

    Sites are opened in a random permutation order, so every draw opens a
    site that is still blocked.

    Args:
        n: Grid side length
        rng: numpy random generator

    Returns:
        Fraction of open sites when the grid first percolates
    """
    perc = Percolation(n)
    for site in rng.permutation(n * n):
        row, col = divmod(int(site), n)
        perc.open(row, col)
        if perc.percolates():
            break
    return perc.open_fraction()


class PercolationStats:
    """
    Repeated independent percolation trials on n-by-n grids.

    Example:
        ps = PercolationStats(20, trials=200, seed=1)
        ps.mean(), ps.confidence_lo(), ps.confidence_hi()
    """

    def __init__(self, n: int, trials: int, seed: Optional[int] = None,
                 confidence: float = 0.95):
        """
        Args:
            n: Grid side length
            trials: Number of independent trials
            seed: Seed for numpy.random.default_rng (None for fresh entropy)
            confidence: Two-sided confidence level of the interval
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 0:
            raise ValueError(f"Grid size must be a positive integer, got {n!r}")
        if isinstance(trials, bool) or not isinstance(trials, numbers.Integral) or trials <= 0:
            raise ValueError(f"Number of trials must be a positive integer, got {trials!r}")
        if isinstance(confidence, bool) or not isinstance(confidence, numbers.Real):
            raise ValueError(f"Confidence must be a number, got {confidence!r}")
        if not 0.0 < confidence < 1.0:
            raise ValueError(f"Confidence must be in (0, 1), got {confidence}")

        self.n = n
        self.trials = trials
        self.seed = seed
        self.confidence = confidence

        rng = np.random.default_rng(seed)
        start = time.time()
        self.thresholds = np.array([estimate_threshold(n, rng) for _ in range(trials)])
        logger.debug("n=%d: %d trials in %.2fs", n, trials, time.time() - start)

    def mean(self) -> float:
        return float(np.mean(self.thresholds))

    def stddev(self) -> float:
        """Sample standard deviation (nan for a single trial)."""
        if self.trials < 2:
            return float('nan')
        return float(np.std(self.thresholds, ddof=1))

    def _half_width(self) -> float:
        if self.trials < 2:
            return float('nan')
        t_crit = stats.t.ppf(0.5 + self.confidence / 2.0, df=self.trials - 1)
        return float(t_crit * self.stddev() / np.sqrt(self.trials))

    def confidence_lo(self) -> float:
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        return self.mean() + self._half_width()

    def summary(self) -> Dict[str, float]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }


def run_sweep(sizes: Iterable[int], trials: int, seed: Optional[int] = None,
              confidence: float = 0.95) -> pd.DataFrame:
    """
    Estimate the threshold for several grid sizes.

    A single seed drives the whole sweep: each size gets its own child seed
    from a numpy SeedSequence, so results are reproducible per size.

    Returns:
        DataFrame with one row per size and columns
        n, trials, mean, stddev, confidence_lo, confidence_hi
    """
    sizes = list(sizes)
    children = np.random.SeedSequence(seed).spawn(len(sizes))

    rows = []
    for n, child in zip(sizes, children):
        logger.info("Running %d trials for n=%d", trials, n)
        child_seed = int(child.generate_state(1)[0])
        rows.append(PercolationStats(n, trials, seed=child_seed, confidence=confidence).summary())

    columns = ['n', 'trials', 'mean', 'stddev', 'confidence_lo', 'confidence_hi']
    return pd.DataFrame(rows, columns=columns)
