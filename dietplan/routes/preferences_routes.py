from fastapi import APIRouter, Depends

from dietplan.controllers.profile_controller import ProfileController
from dietplan.models.preferences import DietaryPreferences
from dietplan.services.plan_store import PlanStore, get_plan_store

router = APIRouter()

@router.post("")
def save_preferences(chat_id: str, preferences: DietaryPreferences, store: PlanStore = Depends(get_plan_store)):
    """ Save user dietary preferences """
    return ProfileController.save_preferences(chat_id, preferences, store)

@router.get("")
def get_preferences(chat_id: str, store: PlanStore = Depends(get_plan_store)):
    """ Retrieve user dietary preferences """
    return ProfileController.get_preferences(chat_id, store)
