"""
Orchestration module

Provides the Deduper facade and output naming helpers.
"""
from record_deduper.orchestration.deduper import Deduper
from record_deduper.orchestration.naming import output_paths, split_extension

__all__ = [
    'Deduper',
    'output_paths',
    'split_extension',
]
