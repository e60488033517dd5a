# dietplan/routes/dependencies.py
from typing import Iterator, Optional

from fastapi import Depends
from openai import OpenAI

from dietplan.config import DietApiSettings, get_settings
from dietplan.services.diet_plan_service import create_client


def get_diet_client(settings: DietApiSettings = Depends(get_settings)) -> Iterator[Optional[OpenAI]]:
    """ OpenAI client for the configured key, or None in demo mode; closed after the request """
    if not settings.is_configured:
        yield None
        return

    client = create_client(settings)
    try:
        yield client
    finally:
        client.close()
