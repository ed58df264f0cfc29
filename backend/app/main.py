import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.auth import router as auth_router
from app.api.goals import router as goals_router
from app.api.checkins import router as checkins_router
from app.api.analytics import router as analytics_router
from app.db import Base, engine
from app.models.user import User, AuthToken  # noqa: F401  (import ensures table is registered)
from app.models.goal import Goal  # noqa: F401
from app.models.daily_completion import DailyCompletion  # noqa: F401
from app.models.burnout_checkin import BurnoutCheckin  # noqa: F401
from app.core.config import settings


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="GoalSync API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (users, goals, checkins, etc.) on startup
Base.metadata.create_all(bind=engine)

app.include_router(auth_router)
app.include_router(goals_router)
app.include_router(checkins_router)
app.include_router(analytics_router)


@app.get("/")
def root():
    return {"message": "GoalSync backend is running"}
