from contextlib import asynccontextmanager
import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request

from execution import ExecutionEnvironmentError, ensure_scratch_dir, execute_code, parse_language
from models import CodeRequest, CodeResponse, HealthResponse

# Load environment variables
load_dotenv()

"""
FastAPI server for the sandboxed code runner
One submission in, one classified result out
"""

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"
MIN_TIME_LIMIT = 1
MAX_TIME_LIMIT = 10


@asynccontextmanager
async def lifespan(app: FastAPI):
    scratch_dir = ensure_scratch_dir()
    logger.info(f"Scratch directory ready at {scratch_dir}")
    yield


app = FastAPI(
    title="Code Runner",
    description="Compiles and runs untrusted code inside a firejail sandbox",
    version=VERSION,
    lifespan=lifespan
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Incoming request: {request.method} {request.url.path}")
    response = await call_next(request)
    return response


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint
    Returns the service status
    """
    return HealthResponse(status="ok", version=VERSION)


@app.post("/api", response_model=CodeResponse)
def run_code(request: CodeRequest):
    """
    Compile and run a submission

    Declared sync so each request's blocking pipeline runs on the worker
    thread pool instead of the event loop.

    Args:
        request: Language, source code, stdin and CPU time limit

    Returns:
        CodeResponse with the outcome status and its message

    Example:
        POST /api
        {
            "language": "Python3",
            "source_code": "print('hi')",
            "input": "",
            "time_limit": 5
        }

        Response:
        {
            "status": "Ok",
            "message": "hi\\n"
        }
    """
    try:
        language = parse_language(request.language)
    except ValueError:
        logger.warning(f"Rejected unsupported language: {request.language!r}")
        raise HTTPException(status_code=400, detail="Invalid language!")

    if not MIN_TIME_LIMIT <= request.time_limit <= MAX_TIME_LIMIT:
        logger.warning(f"Rejected time limit: {request.time_limit}")
        raise HTTPException(
            status_code=400,
            detail=f"Time limit must be between {MIN_TIME_LIMIT}..{MAX_TIME_LIMIT} (seconds)!"
        )

    try:
        outcome = execute_code(
            language=language,
            source_code=request.source_code,
            input_text=request.input,
            time_limit=request.time_limit
        )
    except ExecutionEnvironmentError as e:
        logger.error(f"Execution environment failure: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return CodeResponse(status=outcome.status.value, message=outcome.message)


if __name__ == "__main__":
    import uvicorn

    # Get host/port from environment or default to 127.0.0.1:8080
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", 8080))

    logger.info(f"Starting Code Runner on {host}:{port}")
    uvicorn.run(
        "main:app",  # Use string import path instead of app object
        host=host,
        port=port,
        log_level="info",
        access_log=True
    )
