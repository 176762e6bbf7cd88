"""
Models package - Data models for the bulb relay
"""

from .enums import ResponseStatus, BulbTurn, LogLevel, LogCategory
from .color import ColorRequest, ColorResponse, BulbCommand, clamp_channel, is_valid_channel
from .config import AppConfig, ShellyConfig, ServerConfig, LoggingConfig

__all__ = [
    'ResponseStatus',
    'BulbTurn',
    'LogLevel',
    'LogCategory',
    'ColorRequest',
    'ColorResponse',
    'BulbCommand',
    'clamp_channel',
    'is_valid_channel',
    'AppConfig',
    'ShellyConfig',
    'ServerConfig',
    'LoggingConfig',
]
