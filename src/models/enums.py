"""
Enums for the bulb relay
"""

from enum import Enum, auto


class ResponseStatus(Enum):
    """Outcome tag carried by every ColorResponse"""
    OK = "ok"
    ERROR = "error"


class BulbTurn(Enum):
    """Power action sent to the bulb's color endpoint"""
    ON = "on"
    OFF = "off"


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, env overrides
    BULB = auto()        # Outbound commands to the Shelly bulb
    COLOR = auto()       # Request validation, clamping
    SYSTEM = auto()      # Startup, shutdown, errors
    API = auto()
