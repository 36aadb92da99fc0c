"""
Box Geometry Service - Backend API
FastAPI front for the box drawing engine (live gestures + committed shapes).

Install dependencies:
pip install -e ".[test]"

Run server:
uvicorn main:app --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time
import uuid
import contextvars
from settings import get_settings
from core.sessions import get_session_store

# Request Context for Tracing
request_id_var = contextvars.ContextVar('request_id', default=None)

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from routers import gestures as gestures_router
from routers import shapes as shapes_router

app = FastAPI(
    title="Box Geometry API",
    description="Pointer-drag box drawing, resize/translate/rotate and serialization",
    version="1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.middleware("http")
async def request_tracing_middleware(request, call_next):
    """Add request_id and timing to all requests."""
    request_id = str(uuid.uuid4())[:8]
    request_id_var.set(request_id)
    start = time.time()

    response = await call_next(request)

    latency = time.time() - start
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({round(latency * 1000, 2)} ms) [{request_id}]"
    )
    response.headers["X-Request-ID"] = request_id
    return response


ALLOWED_ORIGINS = settings.get_origins_list()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )

# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "sessions": get_session_store().stats(),
        "version": "1.0"
    }


@app.get("/healthz")
async def healthz():
    """
    Kubernetes-style liveness probe.
    Returns 200 if the application is running.
    """
    return {
        "status": "ok",
        "timestamp": time.time(),
        "version": "1.0"
    }


app.include_router(gestures_router.router)
app.include_router(shapes_router.router)

logger.info("Box Geometry API ready")
