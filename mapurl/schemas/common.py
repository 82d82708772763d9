from pydantic import BaseModel, Field
from typing import Tuple

class LatLon(BaseModel):
    lat: float = Field(..., allow_inf_nan=False, description="Latitude in degrees")
    lon: float = Field(..., allow_inf_nan=False, description="Longitude in degrees")

    class Config:
        frozen = True

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lon)
