"""
Portfolio Content API

Gateway application mounting every router under /api. Run with:
    uvicorn app.main:app
"""
import os
import logging

from fastapi import APIRouter, FastAPI

from apps.shared.database import Base, engine, check_db_connection
from apps.shared.cors import setup_cors
from apps.shared.errors import setup_exception_handlers
from apps.shared.security_headers import setup_security_headers
from apps.admin.main import router as admin_router, auth_router
from apps.experience.main import router as experience_router
from apps.messages.main import router as messages_router, contact_router
from apps.projects.main import router as projects_router
from apps.settings.main import router as settings_router
from apps.skills.main import router as skills_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("portfolio-api")

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Portfolio Content API",
    version="1.0.0",
    description="Admin-managed content for the portfolio site: projects, experience, skills, settings and messages",
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
)

setup_cors(app)
setup_security_headers(app)
setup_exception_handlers(app)

api = APIRouter(prefix="/api")


@api.get("/health")
def health():
    """Health check endpoint - returns service status and database connectivity"""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "portfolio",
        "database": "connected" if db_connected else "disconnected",
    }


for router in (
    admin_router,
    auth_router,
    projects_router,
    experience_router,
    skills_router,
    settings_router,
    messages_router,
    contact_router,
):
    api.include_router(router)

app.include_router(api)
