"""Reading open-site sequence files."""

from .reader import parse_open_sequence, read_open_sequence, replay

__all__ = ['parse_open_sequence', 'read_open_sequence', 'replay']
