import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dietplan.config import get_cors_origins, is_diet_api_configured
from dietplan.routes import bmi_routes, diet_routes, preferences_routes

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Diet Plan Generator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),  # your frontend origin(s)
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include Routers
app.include_router(bmi_routes.router, prefix="/bmi", tags=["BMI"])
app.include_router(preferences_routes.router, prefix="/preferences", tags=["Preferences"])
app.include_router(diet_routes.router, prefix="/diet-plan", tags=["Diet Plan"])

if not is_diet_api_configured():
    logger.warning("DIET_API_KEY is not set; diet plans will use demo data.")

@app.get("/")
def read_root():
    return {"message": "Diet Plan Generator Running!", "api_configured": is_diet_api_configured()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
