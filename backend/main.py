"""
Tagshelf - tag-folder bookmark manager
Main Application Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tagshelf.config import get_settings
from tagshelf.database import init_db
from tagshelf.routes import folders_router, bookmarks_router, tags_router
from tagshelf.services import folder_store, seed_demo_folders

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("tagshelf")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    await init_db()
    logger.info("Database initialized")

    if settings.seed_demo_data and not await folder_store.list_folders():
        created = await seed_demo_folders(folder_store)
        logger.info(f"Seeded {created} demo folders")

    yield

    # Shutdown
    logger.info("Shutting down")


# Create FastAPI app
app = FastAPI(
    title="Tagshelf",
    description="Bookmarks organized in tag folders",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(folders_router, prefix="/api/folders", tags=["folders"])
app.include_router(bookmarks_router, prefix="/api/bookmarks", tags=["bookmarks"])
app.include_router(tags_router, prefix="/api/tags", tags=["tags"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
