from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class BMIRequest(BaseModel):
    weight: float = Field(..., gt=0, description="Weight in kg")
    height: float = Field(..., gt=0, description="Height in cm")
    age: int = Field(..., gt=0)
    gender: Literal["male", "female"]


class BodyMetrics(BaseModel):
    """Body metrics produced by the BMI step; read-only input to plan generation."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    weight: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    age: int = Field(..., gt=0)
    gender: Literal["male", "female"]
    bmi: float
    category: str
    health_status: str = Field(..., alias="healthStatus")
