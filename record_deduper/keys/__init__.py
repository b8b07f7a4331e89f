"""
Key definition, extraction and normalization
"""
from record_deduper.keys.registry import KeyRegistry
from record_deduper.keys.splitter import FieldSplitter
from record_deduper.keys.extractor import FieldExtractor
from record_deduper.keys.transformer import KeyTransformer, KEY_SEPARATOR

__all__ = [
    'KeyRegistry',
    'FieldSplitter',
    'FieldExtractor',
    'KeyTransformer',
    'KEY_SEPARATOR',
]
