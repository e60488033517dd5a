from fastapi import APIRouter, Depends

from dietplan.controllers.profile_controller import ProfileController
from dietplan.models.bmi import BMIRequest
from dietplan.services.plan_store import PlanStore, get_plan_store

router = APIRouter()

@router.post("/calculate")
def calculate_bmi(chat_id: str, request: BMIRequest, store: PlanStore = Depends(get_plan_store)):
    """ Calculate and store the user's BMI """
    return ProfileController.calculate_bmi(chat_id, request, store)

@router.get("")
def get_bmi(chat_id: str, store: PlanStore = Depends(get_plan_store)):
    """ Retrieve the user's stored BMI data """
    return ProfileController.get_bmi(chat_id, store)
