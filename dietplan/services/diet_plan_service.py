# dietplan/services/diet_plan_service.py
import json
import logging
import re
import time
from typing import Any, Dict, Optional

import httpx
from openai import OpenAI

from dietplan.config import DietApiSettings, get_settings
from dietplan.models.bmi import BodyMetrics
from dietplan.models.meal import DietPlanResult
from dietplan.models.preferences import DietaryPreferences
from dietplan.services.mock_plan import generate_mock_diet_plan, missing_day_slots
from dietplan.services.notifier import Notifier
from dietplan.services.prompt_builder import create_diet_prompt

logger = logging.getLogger(__name__)

# ``` or ```json (any language tag), anywhere in the content
CODE_FENCE_RE = re.compile(r"```[\w-]*")

FAILURE_TITLE = "OpenAI Request Failed"
FAILURE_DESCRIPTION = "Failed to fetch your diet plan. Using default recommendations instead."


class DietPlanResponseError(ValueError):
    """The API answered, but not with a usable diet plan."""


class DietPlanParseError(DietPlanResponseError):
    pass


def create_client(settings: DietApiSettings, http_client: Optional[httpx.Client] = None) -> OpenAI:
    # max_retries=0: one attempt per generation request
    return OpenAI(
        api_key=settings.api_key,
        base_url=settings.base_url,
        max_retries=0,
        http_client=http_client,
    )


def strip_code_fences(content: str) -> str:
    return CODE_FENCE_RE.sub("", content).strip()


def parse_diet_plan_content(content: str) -> Dict[str, Any]:
    """
    Parse the model's message content into the {"weeks", "recommendations"} document.
    Only the two top-level keys are checked; the plan itself is trusted as returned.
    """
    json_string = strip_code_fences(content)
    logger.debug("Attempting to parse JSON from: %s...", json_string[:100])

    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise DietPlanParseError(f"Failed to parse the diet plan: {e}") from e

    if not isinstance(data, dict):
        raise DietPlanParseError(f"Expected a JSON object, got {type(data).__name__}")

    if data.get("weeks") is None or data.get("recommendations") is None:
        raise DietPlanParseError("The response did not contain the expected data structure")

    return data


def request_diet_plan_content(prompt: str, settings: DietApiSettings, client: OpenAI) -> str:
    response = client.chat.completions.create(
        model=settings.model,
        messages=[
            {"role": "user", "content": prompt}
        ],
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )

    if not response.choices:
        raise DietPlanResponseError("Response envelope has no choices")

    content = response.choices[0].message.content
    if not isinstance(content, str) or not content.strip():
        raise DietPlanResponseError("Response envelope has no message content")

    return content


def _mock_diet_plan(body_metrics: BodyMetrics, preferences: DietaryPreferences,
                    settings: DietApiSettings) -> DietPlanResult:
    if settings.mock_delay_seconds > 0:
        time.sleep(settings.mock_delay_seconds)
    return generate_mock_diet_plan(body_metrics, preferences)


def fetch_diet_plan(
    body_metrics: BodyMetrics,
    preferences: DietaryPreferences,
    *,
    settings: Optional[DietApiSettings] = None,
    client: Optional[OpenAI] = None,
    notifier: Optional[Notifier] = None,
) -> DietPlanResult:
    """
    Generate a 4-week meal plan and 5 recommendations.

    Without an API key the mock plan is returned and nothing is sent. With a
    key, one chat-completions request is made; any failure along the way
    (transport, HTTP status, envelope, JSON, missing keys) emits a single
    warning notification and returns the mock plan instead. Never raises
    for those failures.
    """
    settings = settings or get_settings()
    notifier = notifier if notifier is not None else Notifier()

    if not settings.is_configured:
        logger.warning("Diet API key not configured. Using mock data instead.")
        return _mock_diet_plan(body_metrics, preferences, settings)

    owns_client = client is None
    try:
        prompt = create_diet_prompt(body_metrics, preferences)
        if owns_client:
            client = create_client(settings)

        logger.info("Sending diet plan request (model=%s)", settings.model)
        try:
            content = request_diet_plan_content(prompt, settings, client)
        finally:
            if owns_client:
                client.close()

        data = parse_diet_plan_content(content)
        result = DietPlanResult(
            meal_plan=data["weeks"],
            recommendations=data["recommendations"],
            source="openai",
        )
    except Exception:
        logger.exception("Error fetching diet plan from the text-generation API")
        notifier.warning(FAILURE_TITLE, FAILURE_DESCRIPTION)
        return _mock_diet_plan(body_metrics, preferences, settings)

    missing = missing_day_slots(result.meal_plan)
    if missing:
        # passed through as-is; the caller gets exactly what the model produced
        logger.warning("Generated plan is missing %d meal slots, e.g. %s", len(missing), missing[:3])

    logger.info("Diet plan generated")
    return result
