import uvicorn
import time
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from pathcleaner.api.clean_path import router as clean_path_router
from pathcleaner.core.config import LOG_DIR, LOG_LEVEL
from pathcleaner.services.async_cleaner import create_cleaner_executor
from pathcleaner.utils.logging_config import setup_logging

setup_logging(level=LOG_LEVEL, log_dir=LOG_DIR or None)
logger = logging.getLogger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One sequential worker for all filesystem probes
    app.state.cleaner_executor = create_cleaner_executor()
    try:
        yield
    finally:
        app.state.cleaner_executor.shutdown(wait=True)


app = FastAPI(title="Terminal Path Cleaner API", lifespan=lifespan)

# ---------------------------------------------------------------------------
# Logging Middleware
# ---------------------------------------------------------------------------
class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            process_time = (time.time() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path} - "
                f"Error: {str(e)} - Time: {process_time:.2f}ms"
            )
            raise
        process_time = (time.time() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.2f}ms"
        )
        return response

app.add_middleware(LoggingMiddleware)

# Health endpoint
@app.get("/health")
async def health_check():
    return {"status": "ok"}

app.include_router(clean_path_router)

if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
