from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from mapurl.routers import static_map
from mapurl.core.config import settings
from mapurl.core.logging_config import logger

app = FastAPI(
    title="Static Map URL Encoder API",
    version="1.0.0",
    redirect_slashes=False
)

# Include routers
app.include_router(static_map.router, prefix="/api/static-map", tags=["Static Map"])

logger.info(f"Static map URL encoder started: environment={settings.ENVIRONMENT}, max_url_length={settings.MAX_URL_LENGTH}")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Report invalid request bodies without echoing the rejected input.

    Rejected values such as NaN cannot be serialized back into a JSON response.
    """
    errors = [
        {key: value for key, value in error.items() if key not in ("input", "ctx")}
        for error in exc.errors()
    ]
    logger.error(f"Invalid request to {request.url.path}: {len(errors)} validation errors")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(errors)}
    )


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "max_url_length": settings.MAX_URL_LENGTH
    }
