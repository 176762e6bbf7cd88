"""
Color models - RGBW request/response value types and the bulb command

ColorRequest is what the API receives, ColorResponse is the envelope sent back,
BulbCommand is what goes over the wire to the Shelly bulb.
All three are immutable and compare by field.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .enums import BulbTurn, ResponseStatus

CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Shelly Gen1 gain is 0..100
DEFAULT_GAIN = 100


def is_valid_channel(value: int) -> bool:
    """Check if a channel value lies in 0..255"""
    return CHANNEL_MIN <= value <= CHANNEL_MAX


def clamp_channel(value: int) -> int:
    """Constrain a channel value to the nearest bound of 0..255"""
    return max(CHANNEL_MIN, min(CHANNEL_MAX, value))


@dataclass(frozen=True)
class ColorRequest:
    """
    Requested RGBW color, one integer per channel.

    Validity is derived on demand; out-of-range values are kept as sent so
    they can be echoed back to the caller.

    Examples:
        req = ColorRequest(r=255, g=128, b=0, w=0)
        req.is_valid()   # True
        req.clamped()    # ColorRequest(r=255, g=128, b=0, w=0)

        ColorRequest(r=-5, g=0, b=300, w=0).clamped()
        # ColorRequest(r=0, g=0, b=255, w=0)
    """
    r: int
    g: int
    b: int
    w: int

    @property
    def channels(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.w)

    def is_valid(self) -> bool:
        """True if all four channels are within 0..255"""
        return all(is_valid_channel(v) for v in self.channels)

    def clamped(self) -> 'ColorRequest':
        """Return a copy with every channel clamped to 0..255"""
        return ColorRequest(*(clamp_channel(v) for v in self.channels))

    def is_off(self) -> bool:
        """All channels zero means the bulb should be switched off"""
        return all(v == 0 for v in self.channels)


@dataclass(frozen=True)
class ColorResponse:
    """Normalized result envelope returned for every color request"""
    status: ResponseStatus
    r: int
    g: int
    b: int
    w: int
    message: str

    @classmethod
    def ok(cls, color: ColorRequest, message: str) -> 'ColorResponse':
        return cls(ResponseStatus.OK, color.r, color.g, color.b, color.w, message)

    @classmethod
    def error(cls, color: ColorRequest, message: str) -> 'ColorResponse':
        return cls(ResponseStatus.ERROR, color.r, color.g, color.b, color.w, message)

    @property
    def is_ok(self) -> bool:
        return self.status is ResponseStatus.OK

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status.value,
            "r": self.r,
            "g": self.g,
            "b": self.b,
            "w": self.w,
            "message": self.message,
        }


@dataclass(frozen=True)
class BulbCommand:
    """
    Command for the Shelly Gen1 /color/0 endpoint.

    OFF sends no channel values; ON sends all four plus gain.
    `color` holds the clamped channels the command was built from.
    """
    turn: BulbTurn
    color: Optional[ColorRequest] = None
    gain: int = DEFAULT_GAIN

    @classmethod
    def off(cls) -> 'BulbCommand':
        return cls(turn=BulbTurn.OFF)

    @classmethod
    def on(cls, color: ColorRequest, gain: int = DEFAULT_GAIN) -> 'BulbCommand':
        return cls(turn=BulbTurn.ON, color=color, gain=gain)

    @classmethod
    def for_color(cls, color: ColorRequest) -> 'BulbCommand':
        """Build the command for an already clamped color"""
        if color.is_off():
            return cls(turn=BulbTurn.OFF, color=color)
        return cls.on(color)

    def to_query_params(self) -> Dict[str, object]:
        """Query parameters in the order the bulb documents them"""
        if self.turn is BulbTurn.OFF or self.color is None:
            return {"turn": BulbTurn.OFF.value}
        return {
            "turn": BulbTurn.ON.value,
            "red": self.color.r,
            "green": self.color.g,
            "blue": self.color.b,
            "white": self.color.w,
            "gain": self.gain,
        }
