"""
RGBW Bulb Relay - API Layer

Structure:
- routes/     : Endpoint handlers
- schemas/    : Pydantic request/response models
- services/   : Boundary logic between routes and the bulb translator
- middleware/ : Error handling
"""

from api.main import create_app

__all__ = ["create_app"]
