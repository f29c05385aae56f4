from .advertizer import Advertizer
from .config import AdvertizerConfig, InvalidConfigurationError
from .event_queue import Event, EventQueue
from .logging_config import setup_logging

__all__ = [
    'Advertizer',
    'AdvertizerConfig',
    'InvalidConfigurationError',
    'Event',
    'EventQueue',
    'setup_logging',
]
