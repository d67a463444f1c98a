from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pocketlaw.common.logger import setup_logger
from pocketlaw.core.config import get_settings
from pocketlaw.api.routers import permissions, navigation, roles

settings = get_settings()

setup_logger(
    "pocketlaw",
    log_dir=settings.log_dir,
    level=settings.log_level,
    file_logging=settings.log_to_file,
)

app = FastAPI(
    title=settings.app_name,
    description="Role-based access control for the Pocketlaw workspace",
    version=settings.version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(permissions.router, prefix="/api")
app.include_router(navigation.router, prefix="/api")
app.include_router(roles.router, prefix="/api")


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.version}


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs" if settings.debug else None,
    }
