import json

import httpx
import pytest

from dietplan.config import DietApiSettings
from dietplan.models.bmi import BodyMetrics
from dietplan.models.meal import DAYS, WEEKS
from dietplan.models.preferences import DietaryPreferences
from dietplan.services.diet_plan_service import create_client
from dietplan.services.plan_store import PlanStore

API_BASE_URL = "https://llm.test/v1"


class FakeRedis:
    """In-memory stand-in for the redis get/set/delete calls the store makes."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        return True

    def delete(self, key):
        return 1 if self.data.pop(key, None) is not None else 0


class RecordingTransport:
    """httpx transport that answers every request with one canned response."""

    def __init__(self, status_code=200, payload=None, error=None):
        self.status_code = status_code
        self.payload = payload
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)

    def client(self, settings):
        return create_client(settings, http_client=httpx.Client(transport=httpx.MockTransport(self)))

    def sent_json(self, index=0):
        return json.loads(self.requests[index].content)


def chat_completion(content):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 10, "total_tokens": 20},
    }


def remote_plan_document():
    weeks = {}
    for w, week in enumerate(WEEKS, start=1):
        weeks[week] = {}
        for day in DAYS:
            weeks[week][day] = {
                "breakfast": f"Masala oats ({week}, {day})",
                "lunch": f"Chana salad bowl ({week}, {day})",
                "dinner": f"Paneer tikka with millet roti ({week}, {day})",
                "snacks": f"Roasted makhana, buttermilk (w{w})",
            }
    return {
        "weeks": weeks,
        "recommendations": [
            "Drink 2.5 litres of water a day",
            "Eat dinner at least 2 hours before bed",
            "Add a seasonal fruit to breakfast",
            "Swap fried snacks for roasted ones",
            "Walk for 10 minutes after meals",
        ],
    }


@pytest.fixture
def body_metrics():
    return BodyMetrics(
        weight=70,
        height=175,
        age=30,
        gender="male",
        bmi=22.9,
        category="Normal weight",
        healthStatus="You have a healthy weight. Maintain your current habits.",
    )


@pytest.fixture
def preferences():
    return DietaryPreferences.model_validate({
        "dietPreference": "vegetarian",
        "activityLevel": "active",
        "cuisinePreference": "Indian",
        "allergies": "peanuts",
        "favoriteFoods": "paneer, dal",
        "hydrationIntake": "moderate",
        "breakfast": "poha",
        "lunch": "rice and dal",
        "dinner": "roti sabzi",
        "healthGoal": "weight_loss",
    })


@pytest.fixture
def configured_settings():
    return DietApiSettings(api_key="sk-test", base_url=API_BASE_URL, mock_delay_seconds=0)


@pytest.fixture
def demo_settings():
    return DietApiSettings(api_key="", base_url=API_BASE_URL, mock_delay_seconds=0)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def store(fake_redis):
    return PlanStore(fake_redis)
