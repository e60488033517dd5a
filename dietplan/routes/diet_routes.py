# dietplan/routes/diet_routes.py
from typing import Optional

from fastapi import APIRouter, Depends
from openai import OpenAI

from dietplan.config import DietApiSettings, get_settings
from dietplan.controllers.diet_controller import DietPlanController
from dietplan.models.meal import DietPlanResponse, GenerateDietPlanRequest
from dietplan.routes.dependencies import get_diet_client
from dietplan.services.plan_store import PlanStore, get_plan_store

router = APIRouter()


@router.post("/generate", response_model=DietPlanResponse)
def generate_diet_plan(
    request: GenerateDietPlanRequest,
    store: PlanStore = Depends(get_plan_store),
    settings: DietApiSettings = Depends(get_settings),
    client: Optional[OpenAI] = Depends(get_diet_client),
):
    """ Generate a 4-week diet plan from the user's stored BMI data and preferences """
    return DietPlanController.generate_diet_plan(request, store, settings, client)


@router.get("", response_model=DietPlanResponse)
def get_diet_plan(chat_id: str, store: PlanStore = Depends(get_plan_store)):
    """ Retrieve the last generated diet plan """
    return DietPlanController.get_diet_plan(chat_id, store)
