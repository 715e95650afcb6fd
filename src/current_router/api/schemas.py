"""API request and response models."""
from __future__ import annotations

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field


class CurrentSampleIn(BaseModel):
    latitude: float
    longitude: float
    uo: float = Field(..., description="Eastward current velocity (m/s)")
    vo: float = Field(..., description="Northward current velocity (m/s)")
    depth: Optional[float] = None
    time: Optional[str] = None


class RouteRequest(BaseModel):
    start: Tuple[float, float] = Field(..., description="(lat, lng) of start point")
    end: Tuple[float, float] = Field(..., description="(lat, lng) of end point")
    samples: Optional[List[CurrentSampleIn]] = Field(
        None, description="Inline current samples; the configured field is used when omitted"
    )
    date: Optional[str] = Field(None, description="YYYY-MM-DD slice of the configured field")
    grid_size: Optional[float] = Field(None, gt=0, description="Lattice step in degrees")
    max_iterations: Optional[int] = Field(None, ge=1, description="Search expansion budget")


class RouteResponse(BaseModel):
    path: List[Tuple[float, float]]
    distance_nm: float
    explored: int
    planned: bool
    date: Optional[str] = None
    warnings: List[str] = []


class DatesResponse(BaseModel):
    dates: List[str]
    latest: Optional[str] = None
