from typing import Optional

from pydantic import Field

from schemas.common import CamelModel


class MediaUpdate(CamelModel):
    alt: Optional[str] = None
    label: Optional[str] = None
    focal_x: Optional[float] = Field(None, ge=0, le=100)
    focal_y: Optional[float] = Field(None, ge=0, le=100)
