# dietplan/services/prompt_builder.py
from dietplan.models.bmi import BodyMetrics
from dietplan.models.preferences import DietaryPreferences


def create_diet_prompt(body_metrics: BodyMetrics, preferences: DietaryPreferences) -> str:
    """ Render body metrics and preferences into the 4-week plan instruction. """

    prefs = preferences.resolved()

    prompt = f"""Create a detailed 4-week diet plan for a person with the following characteristics:
- BMI: {body_metrics.bmi} (Category: {body_metrics.category})
- Weight: {body_metrics.weight:g} kg
- Height: {body_metrics.height:g} cm
- Age: {body_metrics.age}
- Gender: {body_metrics.gender}
- Dietary preference: {prefs.diet_preference}
- Health goal: {prefs.health_goal}
- Activity level: {prefs.activity_level}
- Allergies or food restrictions: {prefs.allergies}
- Cuisine preference: {prefs.cuisine_preference}

For each day (Monday to Sunday) across all 4 weeks (Week 1 to Week 4), provide specific meal recommendations including:
1. Breakfast
2. Lunch
3. Dinner
4. Snacks

Also include exactly 5 general nutrition and lifestyle recommendations based on their health profile.

Format your response as a JSON object with this exact structure:
{{
  "weeks": {{
    "Week 1": {{
      "Monday": {{
        "breakfast": "Detailed breakfast recommendation",
        "lunch": "Detailed lunch recommendation",
        "dinner": "Detailed dinner recommendation",
        "snacks": "Detailed snacks recommendation"
      }},
      "Tuesday": {{
        "breakfast": "...",
        "lunch": "...",
        "dinner": "...",
        "snacks": "..."
      }}
      // ... and so on for all 7 days of the week
    }}
    // ... and so on for all 4 weeks
  }},
  "recommendations": [
    "Recommendation 1",
    "Recommendation 2",
    "Recommendation 3",
    "Recommendation 4",
    "Recommendation 5"
  ]
}}

Ensure the meals are diverse, nutritionally balanced, and aligned with the specified dietary preferences and health goals. Keep portion sizes appropriate for the individual's characteristics."""

    return prompt
