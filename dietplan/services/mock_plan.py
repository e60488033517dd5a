# dietplan/services/mock_plan.py
from typing import Any, List

from dietplan.models.bmi import BodyMetrics
from dietplan.models.meal import DAYS, MEAL_SLOTS, WEEKS, DayMeals, DietPlanResult, MealPlan
from dietplan.models.preferences import DietaryPreferences

VEGETARIAN_TEMPLATE = {
    "breakfast": "Oatmeal with fruits and nuts, green tea",
    "lunch": "Quinoa salad with mixed vegetables and avocado",
    "dinner": "Lentil soup with whole grain bread and side salad",
    "snacks": "Mixed nuts, fruit smoothie",
}

OMNIVORE_TEMPLATE = {
    "breakfast": "Scrambled eggs with whole grain toast, fresh fruit",
    "lunch": "Grilled chicken salad with olive oil dressing",
    "dinner": "Baked salmon with roasted vegetables and quinoa",
    "snacks": "Greek yogurt with berries, protein bar",
}

# health goal -> (suffix per meal, replacement snacks)
GOAL_ADJUSTMENTS = {
    "weight_loss": (
        {
            "breakfast": " (reduced portion)",
            "lunch": " (high protein, low carb)",
            "dinner": " (lean protein focus)",
        },
        "Low-calorie options: cucumber slices, celery sticks with hummus",
    ),
    "weight_gain": (
        {
            "breakfast": " + protein shake",
            "lunch": " with additional healthy fats like avocado",
            "dinner": " with extra portion of complex carbs",
        },
        "Protein-rich snacks: nuts, seeds, protein bars",
    ),
    "muscle_gain": (
        {
            "breakfast": " + protein shake",
            "lunch": " with lean protein",
            "dinner": " with extra protein portion",
        },
        "High protein snacks: boiled eggs, Greek yogurt, protein bars",
    ),
}

MOCK_RECOMMENDATIONS = [
    "Stay hydrated by drinking at least 8 glasses of water daily",
    "Try to eat at regular intervals to maintain energy levels",
    "Include a variety of colorful vegetables and fruits in your diet",
    "Limit processed foods and added sugars",
    "Adjust portion sizes based on your hunger and fullness cues",
]


def build_day_meals(is_vegetarian: bool, health_goal: str) -> DayMeals:
    meals = dict(VEGETARIAN_TEMPLATE if is_vegetarian else OMNIVORE_TEMPLATE)

    adjustment = GOAL_ADJUSTMENTS.get(health_goal)
    if adjustment:
        suffixes, snacks = adjustment
        for slot, suffix in suffixes.items():
            meals[slot] += suffix
        meals["snacks"] = snacks

    return DayMeals(**meals)


def generate_mock_diet_plan(body_metrics: BodyMetrics, preferences: DietaryPreferences) -> DietPlanResult:
    """
    Deterministic 4-week plan used when the remote API is not configured or fails.
    Only diet preference and health goal vary the output; body metrics are
    accepted so both generation paths share a signature.
    """
    prefs = preferences.resolved()

    meal_plan: MealPlan = {}
    for week in WEEKS:
        meal_plan[week] = {}
        for day in DAYS:
            meal_plan[week][day] = build_day_meals(prefs.is_vegetarian, prefs.health_goal).model_dump()

    return DietPlanResult(
        meal_plan=meal_plan,
        recommendations=list(MOCK_RECOMMENDATIONS),
        source="mock",
    )


def missing_day_slots(meal_plan: Any) -> List[str]:
    """List "Week/Day/slot" entries that are absent or empty in a meal plan."""
    if not isinstance(meal_plan, dict):
        return list(WEEKS)

    missing = []
    for week in WEEKS:
        days = meal_plan.get(week)
        if not isinstance(days, dict):
            missing.append(week)
            continue
        for day in DAYS:
            meals = days.get(day)
            if not isinstance(meals, dict):
                missing.append(f"{week}/{day}")
                continue
            for slot in MEAL_SLOTS:
                value = meals.get(slot)
                if not isinstance(value, str) or not value.strip():
                    missing.append(f"{week}/{day}/{slot}")
    return missing
