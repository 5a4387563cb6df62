import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.accounts.router import router as auth_router
from app.admin.router import router as admin_router
from app.bootstrap import bootstrap
from app.config import get_settings
from app.db.database import dispose_engine, get_engine, get_session_factory
from app.errors import register_exception_handlers
from app.feedback.router import router as feedback_router

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await bootstrap(get_engine(), get_session_factory(), settings)
    logger.info(f"Feedback service ready on port {settings.port}")
    yield
    await dispose_engine()


app = FastAPI(title="Feedback Service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(feedback_router)
app.include_router(admin_router)


@app.get("/")
def root():
    return {"message": "Welcome to the Feedback API", "status": "Server is running successfully"}


@app.get("/health")
def health():
    return {"status": "ok"}
