# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from leadboard.config import settings
from leadboard.config import build_sqlalchemy_db_url
from leadboard.database import Base, engine
import leadboard.models  # noqa: F401 - registers ORM tables on Base.metadata
from leadboard.api.routes.health import router as health_router
from leadboard.routers import ai, clients, dashboard, members, opportunities, skills


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(ai.router, prefix=settings.api_prefix)
    application.include_router(skills.router, prefix=settings.api_prefix)
    application.include_router(clients.router, prefix=settings.api_prefix)
    application.include_router(members.router, prefix=settings.api_prefix)
    application.include_router(opportunities.router, prefix=settings.api_prefix)
    application.include_router(dashboard.router, prefix=settings.api_prefix)

    # Avoid accidental schema changes in shared MySQL databases.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
