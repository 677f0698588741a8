from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Point(BaseGolfModel):
    """A map coordinate, optionally with terrain elevation in feet."""
    lat: float
    lng: float
    elevation: Optional[float] = Field(None, alias="elv")
