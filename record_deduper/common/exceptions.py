"""
Custom exceptions for record_deduper
"""


class DeduperError(Exception):
    """Base exception for all deduper errors"""
    pass


class ConfigurationError(DeduperError):
    """Invalid key or separator configuration"""
    pass


class ReadError(DeduperError):
    """Error reading from a line source"""
    pass


class WriteError(DeduperError):
    """Error writing to a line sink"""
    pass
