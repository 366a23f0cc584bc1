"""FastAPI application for the Fact Checker service."""

import contextlib
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from .env file
load_dotenv()

from ..infrastructure.dependencies import get_service_container
from .endpoints import fact_check, health

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared HTTP client on startup and close it on shutdown."""
    service = get_service_container().get_fact_checking_service()
    await service.initialize()
    logger.info("🚀 Fact checker ready")

    yield  # Application runs here

    await get_service_container().shutdown()


# Create FastAPI application
app = FastAPI(
    title="Fact Checker API",
    description="Claim fact-checking by aggregating evidence from multiple providers",
    version=health.VERSION,
    lifespan=lifespan,
)

# Browser extensions call the API from their own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(fact_check.router)
