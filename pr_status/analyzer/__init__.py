"""Discovery and enrichment pipeline."""

from .core import PRStatusCollector
from .enrichment import classify_check_runs

__all__ = ['PRStatusCollector', 'classify_check_runs']
