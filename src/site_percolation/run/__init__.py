"""Experiment configuration."""

from .config import ExperimentConfig

__all__ = ['ExperimentConfig']
