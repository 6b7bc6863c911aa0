"""
Live validation pipeline.
"""

from .realtime import RealtimeValidator, DEFAULT_DEBOUNCE_MS

__all__ = [
    'RealtimeValidator',
    'DEFAULT_DEBOUNCE_MS',
]
