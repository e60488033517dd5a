from fastapi import HTTPException

from dietplan.models.bmi import BMIRequest
from dietplan.models.preferences import DietaryPreferences
from dietplan.services.bmi_calculator import build_body_metrics
from dietplan.services.notifier import Notifier
from dietplan.services.plan_store import PlanStore


class ProfileController:

    @staticmethod
    def calculate_bmi(chat_id: str, request: BMIRequest, store: PlanStore):
        """ Calculate BMI, store it for the user and drop any plan built from older data """
        if not chat_id:
            raise HTTPException(status_code=400, detail="chat_id is required")

        body_metrics = build_body_metrics(request)
        store.save_bmi_data(chat_id, body_metrics)
        store.clear_diet_plan(chat_id)

        notifier = Notifier()
        notifier.info("BMI Calculated Successfully", f"Your BMI is {body_metrics.bmi} ({body_metrics.category})")
        return {
            "bmi_data": body_metrics.model_dump(by_alias=True),
            "notifications": notifier.notifications,
        }

    @staticmethod
    def get_bmi(chat_id: str, store: PlanStore):
        body_metrics = store.get_bmi_data(chat_id)
        if body_metrics is None:
            raise HTTPException(status_code=404, detail="No BMI data found")
        return {"bmi_data": body_metrics.model_dump(by_alias=True)}

    @staticmethod
    def save_preferences(chat_id: str, preferences: DietaryPreferences, store: PlanStore):
        """ Save user dietary preferences for plan generation """
        if not chat_id:
            raise HTTPException(status_code=400, detail="chat_id is required")

        store.save_preferences(chat_id, preferences)
        store.clear_diet_plan(chat_id)
        return {"message": "Dietary preferences saved"}

    @staticmethod
    def get_preferences(chat_id: str, store: PlanStore):
        preferences = store.get_preferences(chat_id)
        if preferences is None:
            raise HTTPException(status_code=404, detail="No preferences found")
        return {"preferences": preferences.model_dump(by_alias=True, exclude_none=True)}
