# dietplan/services/bmi_calculator.py
import math
from typing import Tuple

from dietplan.models.bmi import BMIRequest, BodyMetrics

# (upper bound, category, health status); the last bucket has no upper bound
BMI_CATEGORIES = [
    (18.5, "Underweight",
     "You may need to gain some weight. Consider consulting with a healthcare professional."),
    (25.0, "Normal weight",
     "You have a healthy weight. Maintain your current habits."),
    (30.0, "Overweight",
     "You may need to lose some weight. Focus on a balanced diet and regular exercise."),
    (math.inf, "Obese",
     "Your weight may pose health risks. Consider consulting with a healthcare professional."),
]


def calculate_bmi(weight: float, height: float) -> float:
    """BMI from weight in kg and height in cm, rounded half-up to one decimal."""
    if height <= 0:
        raise ValueError("height must be positive")

    height_m = height / 100
    bmi = weight / (height_m * height_m)
    return math.floor(bmi * 10 + 0.5) / 10


def get_bmi_category(bmi: float) -> Tuple[str, str]:
    for upper, category, health_status in BMI_CATEGORIES:
        if bmi < upper:
            return category, health_status
    return BMI_CATEGORIES[-1][1], BMI_CATEGORIES[-1][2]


def build_body_metrics(request: BMIRequest) -> BodyMetrics:
    bmi = calculate_bmi(request.weight, request.height)
    category, health_status = get_bmi_category(bmi)
    return BodyMetrics(
        weight=request.weight,
        height=request.height,
        age=request.age,
        gender=request.gender,
        bmi=bmi,
        category=category,
        health_status=health_status,
    )
