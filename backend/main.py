from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from dotenv import load_dotenv

load_dotenv()
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from database import Base, engine, SessionLocal, SQLALCHEMY_DATABASE_URL, ensure_sqlite_directory
from datetime import datetime
from seed_data import seed_sample_data
import models  # noqa: F401 registers every table on Base.metadata
import routers.skus as skus
import routers.batches as batches
import routers.press as press
import os
import logging


LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Configure the root logger
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

if LOG_DIR:
    os.makedirs(LOG_DIR, exist_ok=True)  # Create the log directory if it doesn't exist
    # Create a unique log file name based on current date/time
    current_time_str = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    LOG_FILE = os.path.join(LOG_DIR, f"app_{current_time_str}.log")
    file_handler = logging.FileHandler(LOG_FILE, mode='a')
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(file_handler)

# Get a logger for this module (app.main)
logger = logging.getLogger(__name__)


def init_db():
    """Create missing tables and seed the sample catalog on an empty database."""
    ensure_sqlite_directory(SQLALCHEMY_DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    if os.getenv("SEED_SAMPLE_DATA", "1") != "0":
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    init_db()
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Tablet Production API",
    version="1.0.0",
    description="Batch, picking and press tracking for tablet manufacturing",
    lifespan=lifespan,
)


allowed_origins_str = os.getenv("CORS_ALLOWED_ORIGINS", "*")

# Split the string into a list, stripping any whitespace
allowed_origins = [origin.strip() for origin in allowed_origins_str.split(',')]

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or invalid request fields are reported as 400, not 422."""
    errors = {}
    for entry in exc.errors():
        loc = ".".join(str(part) for part in entry.get("loc", []) if part != "body")
        errors[loc or "body"] = entry.get("msg", "invalid")
    message = "; ".join(f"{field}: {msg}" for field, msg in errors.items())
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"detail": message, "errors": errors})


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    detail = str(getattr(exc, "orig", None) or exc)
    return JSONResponse(status_code=500, content={"detail": detail})


app.include_router(skus.router)
app.include_router(batches.router)
app.include_router(press.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
