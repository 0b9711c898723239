import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contentful_local.api.delivery import DeliveryError, error_response, router as delivery_router
from contentful_local.core.dependencies import get_client_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="contentful-local",
    version="0.1.0",
    description="Read-only content delivery API served from a local JSON snapshot.",
)


@app.on_event("startup")
async def startup_event() -> None:
    """
    Log which snapshot this process serves.
    """
    config = get_client_config()
    space_dir = config.local_path / config.space
    if not (space_dir / "space.json").is_file():
        logger.warning(f"No space.json found in {space_dir}; requests will fail until it is synced")
    logger.info(f"Serving space {config.space} from {space_dir}")


@app.exception_handler(DeliveryError)
async def delivery_error_handler(request: Request, exc: DeliveryError) -> JSONResponse:
    return error_response(exc)


@app.get("/health")
async def health() -> dict:
    """
    Lightweight health check endpoint.
    """
    return {"status": "ok"}


app.include_router(delivery_router, tags=["delivery"])


if __name__ == "__main__":
    """
    Allow running `python -m contentful_local.main` to start the Uvicorn
    development server.
    """
    import uvicorn

    uvicorn.run(
        "contentful_local.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
