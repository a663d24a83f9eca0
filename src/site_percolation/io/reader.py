"""
Reading open-site sequences.

An input file holds whitespace-separated integers: the grid size N followed
by (row, col) pairs, one site per pair, e.g.

    3
    0 1
    1 1
    2 1
"""

from pathlib import Path
from typing import List, Tuple, Union

from ..percolation.grid import Percolation


def parse_open_sequence(text: str) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Parse the contents of an open-sequence file.

    Returns:
        Tuple of (n, sites) where sites is a list of (row, col) tuples
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("Open sequence is empty, expected grid size first")

    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid integer in open sequence: {token!r}") from None

    n, coords = values[0], values[1:]
    if len(coords) % 2 != 0:
        raise ValueError(f"Open sequence has an unpaired coordinate: {coords[-1]}")

    sites = list(zip(coords[0::2], coords[1::2]))
    return n, sites


def read_open_sequence(path: Union[str, Path]) -> Tuple[int, List[Tuple[int, int]]]:
    """Read and parse an open-sequence file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Open sequence file not found: {path}")

    with open(path, 'r') as f:
        return parse_open_sequence(f.read())


def replay(path: Union[str, Path]) -> Percolation:
    """Build a grid from an open-sequence file and open every listed site in order."""
    n, sites = read_open_sequence(path)
    perc = Percolation(n)
    for row, col in sites:
        perc.open(row, col)
    return perc
