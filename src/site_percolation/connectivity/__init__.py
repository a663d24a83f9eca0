"""Disjoint-set connectivity structures."""

from .union_find import WeightedQuickUnionUF

__all__ = ['WeightedQuickUnionUF']
