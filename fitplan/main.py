"""
FitPlan Microservice - Main Entry Point

AI-powered 7-day workout and diet plan generator.
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fitplan.core.config import settings
from fitplan.core.errors import ProfileValidationError
from fitplan.core.logger import logger
from fitplan.routes import image, plan, quote
from fitplan.services.cache_service import create_store
from fitplan.services.openai_service import PlanRequestExecutor, create_client, retry_policy_from_settings


# Validate configuration on startup. Without a key every plan is the fallback.
try:
    settings.validate()
    logger.info("Configuration validated successfully")
except ValueError as e:
    logger.warning(f"Configuration error: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = create_client(settings)
    app.state.executor = PlanRequestExecutor(client, retry_policy_from_settings(settings))
    app.state.plan_store = create_store()
    yield
    await client.close()


# Create FastAPI app
app = FastAPI(
    title="FitPlan Microservice",
    description="AI-powered 7-day workout and diet plan generator",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(ProfileValidationError)
async def profile_validation_handler(request: Request, exc: ProfileValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.errors})


# Include route modules
app.include_router(plan.router, tags=["Plan"])
app.include_router(quote.router, tags=["Quote"])
app.include_router(image.router, tags=["Image"])


@app.get("/")
def root():
    """Health check endpoint."""
    return {"message": "FitPlan Microservice running"}


@app.get("/health")
def health():
    """
    Detailed health status.
    Returns 'degraded' if required environment variables are missing.
    """
    required_vars = ["OPENROUTER_API_KEY"]
    missing = [v for v in required_vars if not os.environ.get(v)]

    if missing:
        return JSONResponse(
            status_code=200,
            content={
                "status": "degraded",
                "service": "fitplan-microservice",
                "version": "1.0.0",
                "missing_config": missing,
                "message": f"Missing required environment variables: {', '.join(missing)}"
            }
        )

    return {
        "status": "healthy",
        "service": "fitplan-microservice",
        "version": "1.0.0"
    }


# Run with uvicorn when executed directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "fitplan.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False
    )
