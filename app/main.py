"""Main FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.routes import qa, render, sessions, ui
from core.models.response import ErrorResponse
from core.services.errors import ChatError
from core.utils.logger import logger

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG
)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger.info("Gemini Chat Application Starting...")
    logger.info(f"Gemini API: {'Configured' if settings.GEMINI_API_KEY else 'Not Configured'} (model {settings.GEMINI_MODEL})")
    logger.info(f"Session store: {settings.DATA_PATH}")


@app.exception_handler(ChatError)
async def chat_error_handler(request: Request, exc: ChatError):
    """Domain errors answer with {"error": message}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(exclude_none=True),
    )


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(sessions.router, prefix="/api", tags=["Sessions"])
app.include_router(qa.router, prefix="/api", tags=["Q&A"])
app.include_router(render.router, prefix="/api", tags=["Rendering"])
app.include_router(ui.router, tags=["UI"])


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
