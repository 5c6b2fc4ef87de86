import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from recovery.api.check_ins import router as check_ins_router
from recovery.api.coping_strategies import router as strategies_router
from recovery.api.emergency_contacts import router as contacts_router
from recovery.api.goals import router as goals_router
from recovery.api.milestones import router as milestones_router
from recovery.api.profile import router as profile_router
from recovery.api.stats import router as stats_router
from recovery.db import Base, engine
from recovery.models.check_in import DailyCheckIn  # noqa: F401  (import ensures table is registered)
from recovery.models.coping_strategy import CopingStrategy  # noqa: F401
from recovery.models.emergency_contact import EmergencyContact  # noqa: F401
from recovery.models.goal import Goal  # noqa: F401
from recovery.models.milestone import Milestone  # noqa: F401
from recovery.models.recovery_profile import RecoveryProfile  # noqa: F401
from recovery.core.config import settings


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Recovery Tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables on startup
Base.metadata.create_all(bind=engine)

app.include_router(check_ins_router)
app.include_router(goals_router)
app.include_router(milestones_router)
app.include_router(profile_router)
app.include_router(stats_router)
app.include_router(strategies_router)
app.include_router(contacts_router)


@app.get("/")
def root():
    return {"message": "Recovery backend is running"}
