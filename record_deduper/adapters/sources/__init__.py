"""
Line sources for feeding records to the classifier.
"""
from record_deduper.adapters.sources.text_source import TextFileSource
from record_deduper.adapters.sources.memory_source import IterableSource

__all__ = [
    'TextFileSource',
    'IterableSource',
]
