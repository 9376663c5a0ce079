from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from aquaqual.ai.chat.exceptions import ChatError
from aquaqual.ai.chat.router import router as chat_router
from aquaqual.config import get_client_base_url
from aquaqual.utils.logger import logger


def get_version() -> str:
    """Get the installed package version."""
    try:
        return version("aquaqual")
    except PackageNotFoundError:
        return "0.0.0"


app = FastAPI(
    title="AquaQual API",
    description="Climate risk chat for South Florida neighborhoods",
    version=get_version(),
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_client_base_url()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router, prefix="/api")


@app.exception_handler(ChatError)
async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
    """Render chat failures as ``{"error": ..., "details": ...}``."""
    logger.error(
        "[CHAT] Request failed",
        path=request.url.path,
        status_code=int(exc.status_code),
        error=exc.message,
        details=exc.details,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(exclude_none=True),
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {"status": "ok", "message": "AquaQual API is running"}


@app.get("/healthcheck")
async def healthcheck():
    """Health check endpoint."""
    return {"status": "ok", "message": "AquaQual API is running"}
