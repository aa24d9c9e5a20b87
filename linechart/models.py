"""Data model for chart requests, render plans and API responses"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class RequestVariant(str, Enum):
    """Request layouts accepted by the service"""

    SINGLE_ARRAY = "single"  # Y values only, X synthesized from X_Start/X_End
    DUAL_ARRAY = "dual"  # explicit X and Y values per series

    @property
    def points_key(self) -> str:
        """Top-level key holding the nested array of sub-objects"""
        return "Y_Points" if self is RequestVariant.SINGLE_ARRAY else "Points"

    @property
    def y_key(self) -> str:
        return "Points" if self is RequestVariant.SINGLE_ARRAY else "Y_Points"

    @property
    def x_key(self) -> Optional[str]:
        return None if self is RequestVariant.SINGLE_ARRAY else "X_Points"


class Series(BaseModel):
    """One plotted line as supplied by the caller"""

    caption: str = Field(min_length=1)
    y_values: List[float]
    x_values: Optional[List[float]] = None  # None for the single-array layout


class ChartRequest(BaseModel):
    """A request that passed every validation gate"""

    variant: RequestVariant
    x_start: float
    x_end: float
    series: List[Series] = Field(min_length=1)


class AxisRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    minimum: float
    maximum: float
    tick_count: int


class PlotLine(BaseModel):
    caption: str = Field(min_length=1)
    color: str  # "#rrggbb"
    points: List[Tuple[float, float]]


class RenderPlan(BaseModel):
    """Renderer-agnostic description of axes and lines"""

    x_axis: AxisRange
    y_axis: AxisRange
    lines: List[PlotLine]


# Response bodies. Field names are the wire names callers already rely on.


class MessageResponse(BaseModel):
    Message: str


class LinkResponse(BaseModel):
    Link: str
    Message: str


class DataResponse(BaseModel):
    Message: str
    Data: str
