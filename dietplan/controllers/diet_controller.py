import logging
from typing import Optional

from fastapi import HTTPException
from openai import OpenAI

from dietplan.config import DietApiSettings
from dietplan.models.meal import DietPlanResponse, GenerateDietPlanRequest
from dietplan.services.diet_plan_service import fetch_diet_plan
from dietplan.services.notifier import Notifier
from dietplan.services.plan_store import PlanStore

logger = logging.getLogger(__name__)


class DietPlanController:

    @staticmethod
    def generate_diet_plan(request: GenerateDietPlanRequest, store: PlanStore,
                           settings: DietApiSettings, client: Optional[OpenAI] = None) -> DietPlanResponse:
        """Generate (or return the already generated) plan from the stored BMI data and preferences."""
        chat_id = request.chat_id

        if not request.regenerate:
            existing = store.get_diet_plan(chat_id)
            if existing is not None:
                return DietPlanResponse(**existing.model_dump(), cached=True)

        body_metrics = store.get_bmi_data(chat_id)
        preferences = store.get_preferences(chat_id)
        if body_metrics is None or preferences is None:
            raise HTTPException(status_code=404, detail="BMI data and dietary preferences are required before generating a plan")

        notifier = Notifier()
        result = fetch_diet_plan(body_metrics, preferences, settings=settings, client=client, notifier=notifier)

        if not settings.is_configured:
            notifier.info("Using Demo Mode", "Set up DIET_API_KEY in your .env file to enable real API integration")

        store.save_diet_plan(chat_id, result)
        logger.info("Stored %s diet plan for user %s", result.source, chat_id)

        return DietPlanResponse(**result.model_dump(), notifications=notifier.notifications)

    @staticmethod
    def get_diet_plan(chat_id: str, store: PlanStore) -> DietPlanResponse:
        plan = store.get_diet_plan(chat_id)
        if plan is None:
            raise HTTPException(status_code=404, detail="No diet plan found")
        return DietPlanResponse(**plan.model_dump(), cached=True)
