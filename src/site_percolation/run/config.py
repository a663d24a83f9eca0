"""
Experiment configuration.

ExperimentConfig loads a YAML definition of a threshold sweep: which grid
sizes to run, how many trials per size, and where to write the results.
"""

import numbers
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


class ExperimentConfig:
    """
    Loads and validates an experiment configuration YAML.

    Example:
        config = ExperimentConfig.from_yaml('config/threshold_sweep.yaml')
        print(config.run_name)
        print(config.sizes, config.trials)
    """

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise ValueError("Experiment config must be a mapping")
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'ExperimentConfig':
        """Load experiment config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Experiment config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data)

    def _validate(self):
        for section in ['run_name', 'experiment']:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        experiment = self._data['experiment']
        if not isinstance(experiment, dict):
            raise ValueError(f"'experiment' must be a mapping, got {experiment!r}")
        for key in ['sizes', 'trials']:
            if key not in experiment:
                raise ValueError(f"Missing required experiment key: '{key}'")

        sizes = experiment['sizes']
        if not isinstance(sizes, list) or not sizes:
            raise ValueError(f"'sizes' must be a non-empty list, got {sizes!r}")
        for n in sizes:
            if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
                raise ValueError(f"Grid sizes must be positive integers, got {n!r}")

        trials = experiment['trials']
        if isinstance(trials, bool) or not isinstance(trials, int) or trials <= 0:
            raise ValueError(f"'trials' must be a positive integer, got {trials!r}")

        seed = experiment.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
            raise ValueError(f"'seed' must be a non-negative integer, got {seed!r}")

        confidence = experiment.get('confidence', 0.95)
        if isinstance(confidence, bool) or not isinstance(confidence, numbers.Real):
            raise ValueError(f"'confidence' must be a number, got {confidence!r}")
        if not 0.0 < confidence < 1.0:
            raise ValueError(f"'confidence' must be in (0, 1), got {confidence}")

        output = self._data.get('output')
        if output is not None:
            if not isinstance(output, dict):
                raise ValueError(f"'output' must be a mapping, got {output!r}")
            csv = output.get('csv')
            if csv is not None and not isinstance(csv, str):
                raise ValueError(f"'output.csv' must be a path string, got {csv!r}")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def sizes(self) -> List[int]:
        return list(self._data['experiment']['sizes'])

    @property
    def trials(self) -> int:
        return self._data['experiment']['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data['experiment'].get('seed')

    @property
    def confidence(self) -> float:
        return float(self._data['experiment'].get('confidence', 0.95))

    @property
    def output_csv(self) -> Optional[Path]:
        csv = (self._data.get('output') or {}).get('csv')
        return Path(csv) if csv else None
