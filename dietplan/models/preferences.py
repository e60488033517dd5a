from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Defaults substituted for any preference the user left out.
PREFERENCE_DEFAULTS = {
    "diet_preference": "normal",
    "health_goal": "maintenance",
    "activity_level": "moderate",
    "allergies": "none",
    "cuisine_preference": "none",
}


class DietaryPreferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    diet_preference: Optional[str] = Field(None, alias="dietPreference", description="vegetarian | non-vegetarian | vegan | pescatarian")
    activity_level: Optional[str] = Field(None, alias="activityLevel", description="sedentary | moderate | active")
    cuisine_preference: Optional[str] = Field(None, alias="cuisinePreference")
    allergies: Optional[str] = None
    favorite_foods: Optional[str] = Field(None, alias="favoriteFoods")
    disliked_foods: Optional[str] = Field(None, alias="dislikedFoods")
    hydration_intake: Optional[str] = Field(None, alias="hydrationIntake", description="low | moderate | high")
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None
    snacks: Optional[str] = None
    health_goal: Optional[str] = Field(
        None, alias="healthGoal",
        description="weight_loss | weight_gain | maintenance | muscle_gain | general_health",
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def resolved(self) -> "ResolvedPreferences":
        values = {key: getattr(self, key) or default for key, default in PREFERENCE_DEFAULTS.items()}
        return ResolvedPreferences(**values)


class ResolvedPreferences(BaseModel):
    """Preferences with every default filled in, resolved once per request."""
    model_config = ConfigDict(frozen=True)

    diet_preference: str
    health_goal: str
    activity_level: str
    allergies: str
    cuisine_preference: str

    @property
    def is_vegetarian(self) -> bool:
        return self.diet_preference in ("vegetarian", "vegan")

