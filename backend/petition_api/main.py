from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException as StarletteHTTPException

from petition_api.core.config import settings
from petition_api.core.errors import InvalidRequestBody, PetitionAPIError, UnsupportedMethod
import logging
import sys

# Configure Logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Petition Generator API",
    version="1.0.0",
    description="Drafts victim-side sentencing petitions with an LLM, capped per client per day",
)

CORS_METHODS = ["POST", "OPTIONS"]
CORS_HEADERS = ["Content-Type"]


class PreflightCORSMiddleware(CORSMiddleware):
    """
    Answers every browser pre-flight with 200 and an empty body,
    whatever origin, method or headers it asks for.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        return Response(
            status_code=200,
            headers={
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
                "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
            },
        )


# CORS Config - any origin may call the generator
app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=["*"],
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)


@app.exception_handler(PetitionAPIError)
async def petition_error_handler(request: Request, exc: PetitionAPIError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected malformed body: {exc.errors()}")
    error = InvalidRequestBody()
    return JSONResponse(status_code=error.status_code, content=error.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        error = UnsupportedMethod()
        return JSONResponse(status_code=error.status_code, content=error.to_body(), headers=exc.headers)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.get("/health")
async def health_check():
    return {"status": "ok", "model": settings.LLM_MODEL}

# Include Routers
from petition_api.api.routes import petition
app.include_router(petition.router, prefix="/api", tags=["Petition"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
