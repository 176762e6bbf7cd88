"""
Color schemas - Pydantic models for the set-color endpoint

Channels are strict ints: JSON booleans, numeric strings and floats are
rejected with 422. The 0..255 range is checked by ColorAPIService, which
answers out-of-range values with the color envelope (HTTP 400).
"""

from pydantic import BaseModel, Field
from typing import Literal, Optional

from models.color import ColorRequest, ColorResponse


class SetColorRequest(BaseModel):
    """RGBW color to apply to the bulb"""
    r: int = Field(strict=True, description="Red channel 0-255")
    g: int = Field(strict=True, description="Green channel 0-255")
    b: int = Field(strict=True, description="Blue channel 0-255")
    w: int = Field(strict=True, description="White channel 0-255")

    model_config = {
        "json_schema_extra": {
            "example": {"r": 255, "g": 120, "b": 0, "w": 0}
        }
    }

    def to_domain(self) -> ColorRequest:
        return ColorRequest(r=self.r, g=self.g, b=self.b, w=self.w)


class ColorResponseBody(BaseModel):
    """Result envelope; status is "error" for both rejected and failed requests"""
    status: Literal["ok", "error"]
    r: int
    g: int
    b: int
    w: int
    message: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "ok",
                "r": 255, "g": 120, "b": 0, "w": 0,
                "message": "Shelly Gen1 applied via GET http://192.168.1.50/color/0?turn=on&red=255&green=120&blue=0&white=0&gain=100"
            }
        }
    }

    @classmethod
    def from_domain(cls, response: ColorResponse) -> 'ColorResponseBody':
        return cls(**response.to_dict())


class BulbStatusResponse(BaseModel):
    """Whether a bulb address is configured and where commands go"""
    configured: bool
    address: Optional[str] = Field(None, description="Configured bulb host[:port]")
    endpoint: Optional[str] = Field(None, description="Full color endpoint URL")
