# dietplan/services/plan_store.py
import json
import logging
from typing import Any, Optional

from dietplan.database import redis_client
from dietplan.models.bmi import BodyMetrics
from dietplan.models.meal import DietPlanResult
from dietplan.models.preferences import DietaryPreferences

logger = logging.getLogger(__name__)

BMI_KEY = "bmiData"
PREFERENCES_KEY = "dietaryPreferences"
DIET_PLAN_KEY = "dietPlan"


class PlanStore:
    """JSON key/value storage for one user's BMI data, preferences and plan.

    `client` is anything with redis-style get/set/delete on strings.
    """

    def __init__(self, client):
        self.client = client

    @staticmethod
    def _key(chat_id: str, name: str) -> str:
        return f"user:{chat_id}:{name}"

    def _set(self, chat_id: str, name: str, value: Any) -> None:
        self.client.set(self._key(chat_id, name), json.dumps(value))

    def _get(self, chat_id: str, name: str) -> Optional[Any]:
        raw = self.client.get(self._key(chat_id, name))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable %s for user %s", name, chat_id)
            return None

    def save_bmi_data(self, chat_id: str, body_metrics: BodyMetrics) -> None:
        self._set(chat_id, BMI_KEY, body_metrics.model_dump(by_alias=True))

    def get_bmi_data(self, chat_id: str) -> Optional[BodyMetrics]:
        data = self._get(chat_id, BMI_KEY)
        return BodyMetrics.model_validate(data) if data is not None else None

    def save_preferences(self, chat_id: str, preferences: DietaryPreferences) -> None:
        self._set(chat_id, PREFERENCES_KEY, preferences.model_dump(by_alias=True, exclude_none=True))

    def get_preferences(self, chat_id: str) -> Optional[DietaryPreferences]:
        data = self._get(chat_id, PREFERENCES_KEY)
        return DietaryPreferences.model_validate(data) if data is not None else None

    def save_diet_plan(self, chat_id: str, plan: DietPlanResult) -> None:
        self._set(chat_id, DIET_PLAN_KEY, plan.model_dump())

    def get_diet_plan(self, chat_id: str) -> Optional[DietPlanResult]:
        data = self._get(chat_id, DIET_PLAN_KEY)
        return DietPlanResult.model_validate(data) if data is not None else None

    def clear_diet_plan(self, chat_id: str) -> None:
        self.client.delete(self._key(chat_id, DIET_PLAN_KEY))


def get_plan_store() -> PlanStore:
    return PlanStore(redis_client)
