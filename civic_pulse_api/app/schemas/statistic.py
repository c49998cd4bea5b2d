"""
Pydantic models for area statistics.

Statistics describe a zipcode, a city or a state for a given year.
They are looked up by the ``area`` value rather than by ``id``.
"""

from typing import Literal

from pydantic import Field

from .base import ApiModel

AreaType = Literal["zipcode", "city", "state"]


class StatisticCreate(ApiModel):
    """Schema for creating a statistics entry."""

    area: str = Field(..., examples=["94102"])
    area_type: AreaType = Field(..., examples=["zipcode"])
    crime_rate: float
    median_income: float
    education_score: float
    housing_cost: float
    population: int = Field(..., ge=0)
    year: int = Field(..., examples=[2024])


class Statistic(StatisticCreate):
    """Stored statistics entry."""

    id: str
