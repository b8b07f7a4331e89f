"""Line sinks for classified records"""

from record_deduper.adapters.destinations.text_sink import TextFileSink
from record_deduper.adapters.destinations.memory_sink import ListSink

__all__ = [
    'TextFileSink',
    'ListSink',
]
