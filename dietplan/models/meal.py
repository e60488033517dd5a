from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

WEEKS = ["Week 1", "Week 2", "Week 3", "Week 4"]
DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MEAL_SLOTS = ["breakfast", "lunch", "dinner", "snacks"]

# week label -> day label -> {breakfast, lunch, dinner, snacks}
MealPlan = Dict[str, Dict[str, Any]]


class DayMeals(BaseModel):
    breakfast: str
    lunch: str
    dinner: str
    snacks: str


class Notification(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class DietPlanResult(BaseModel):
    # remote values are carried exactly as the model returned them
    meal_plan: Any
    recommendations: Any
    source: Literal["openai", "mock"]


class DietPlanResponse(DietPlanResult):
    notifications: List[Notification] = Field(default_factory=list)
    cached: bool = Field(False, description="True when an already generated plan was returned")


class GenerateDietPlanRequest(BaseModel):
    chat_id: str
    regenerate: bool = Field(False, description="Discard the stored plan and generate a new one")
