import pytest

from dietplan.models.bmi import BMIRequest
from dietplan.models.preferences import DietaryPreferences
from dietplan.services.bmi_calculator import build_body_metrics, calculate_bmi, get_bmi_category
from dietplan.services.prompt_builder import create_diet_prompt


# ---------- BMI ----------

def test_bmi_fixture_value():
    assert calculate_bmi(70, 175) == 22.9
    assert get_bmi_category(22.9)[0] == "Normal weight"


def test_bmi_rounds_half_up():
    # 45 / 1.5^2 == 20.0 exactly; 81.45 / 1.8^2 == 25.1388...
    assert calculate_bmi(45, 150) == 20.0
    assert calculate_bmi(81.45, 180) == 25.1


@pytest.mark.parametrize("bmi,category", [
    (18.4, "Underweight"),
    (18.5, "Normal weight"),
    (24.9, "Normal weight"),
    (25.0, "Overweight"),
    (29.9, "Overweight"),
    (30.0, "Obese"),
    (41.2, "Obese"),
])
def test_bmi_category_boundaries(bmi, category):
    assert get_bmi_category(bmi)[0] == category


def test_zero_height_is_rejected():
    with pytest.raises(ValueError):
        calculate_bmi(70, 0)


def test_build_body_metrics():
    metrics = build_body_metrics(BMIRequest(weight=95, height=170, age=41, gender="female"))

    assert metrics.bmi == 32.9
    assert metrics.category == "Obese"
    assert metrics.health_status.startswith("Your weight may pose health risks")
    assert metrics.model_dump(by_alias=True)["healthStatus"] == metrics.health_status


# ---------- prompt ----------

def test_prompt_embeds_metrics_and_preferences(body_metrics, preferences):
    prompt = create_diet_prompt(body_metrics, preferences)

    assert "- BMI: 22.9 (Category: Normal weight)" in prompt
    assert "- Weight: 70 kg" in prompt
    assert "- Height: 175 cm" in prompt
    assert "- Age: 30" in prompt
    assert "- Gender: male" in prompt
    assert "- Dietary preference: vegetarian" in prompt
    assert "- Health goal: weight_loss" in prompt
    assert "- Activity level: active" in prompt
    assert "- Allergies or food restrictions: peanuts" in prompt
    assert "- Cuisine preference: Indian" in prompt


def test_prompt_substitutes_defaults(body_metrics):
    prompt = create_diet_prompt(body_metrics, DietaryPreferences.model_validate({"allergies": ""}))

    assert "- Dietary preference: normal" in prompt
    assert "- Health goal: maintenance" in prompt
    assert "- Activity level: moderate" in prompt
    assert "- Allergies or food restrictions: none" in prompt
    assert "- Cuisine preference: none" in prompt


def test_prompt_requests_full_structure(body_metrics, preferences):
    prompt = create_diet_prompt(body_metrics, preferences)

    assert "all 4 weeks" in prompt
    assert "Monday to Sunday" in prompt
    for slot in ("Breakfast", "Lunch", "Dinner", "Snacks"):
        assert slot in prompt
    assert "exactly 5" in prompt
    assert '"weeks": {' in prompt
    assert '"Week 1": {' in prompt
    assert '"Monday": {' in prompt
    assert '"recommendations": [' in prompt
    assert "{{" not in prompt


def test_prompt_is_deterministic(body_metrics, preferences):
    assert create_diet_prompt(body_metrics, preferences) == create_diet_prompt(body_metrics, preferences)
