

# --- [1] Standard Library Imports ---
import os
import yaml
import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# --- [2] Third-Party Imports ---
import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- [3] Local Application Imports ---
from ..errors import MedicineLookupError
from ..label_client import BaseLabelClient, create_label_client
from ..lookup import search_medicine, suggest_medicines
from .schemas import ErrorResponse, HealthResponse, MedicineInfo, SuggestionsResponse

# --- [4] Application Setup & Configuration ---
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

PROJECT_ROOT = Path(__file__).resolve().parents[2]
PUBLIC_DIR = PROJECT_ROOT / "public"
PORT = int(os.getenv("PORT", 8000))

# --- [5] Global Objects & Configuration Loading ---
def load_app_config():
    try:
        config_path = PROJECT_ROOT / "params.yaml"
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        logging.error("❌ CRITICAL: params.yaml not found in the root directory! Using defaults.")
        return {}

params = load_app_config()

# Set once by the startup task; None means "still initializing"
LABEL_CLIENT: Optional[BaseLabelClient] = None

async def initialize_label_client():
    global LABEL_CLIENT
    try:
        LABEL_CLIENT = await run_in_threadpool(create_label_client, params.get('openfda', {}))
        logging.info("✅ openFDA label client initialized successfully.")
    except Exception as e:
        logging.error(f"❌ CRITICAL: Failed to initialize openFDA label client: {e}")
        LABEL_CLIENT = None

@asynccontextmanager
async def lifespan(app: FastAPI):
    global LABEL_CLIENT
    # Requests are accepted while the client is still being built
    init_task = asyncio.create_task(initialize_label_client())
    logging.info(f"🏥 Open Clinic server running on http://localhost:{PORT}")
    logging.info(f"📊 Health check available at http://localhost:{PORT}/health")
    yield
    init_task.cancel()
    if LABEL_CLIENT is not None:
        LABEL_CLIENT.close()
        LABEL_CLIENT = None
    logging.info("Open Clinic server shutting down...")

def get_label_client() -> Optional[BaseLabelClient]:
    return LABEL_CLIENT

app = FastAPI(
    title="Open Clinic API",
    description="Looks up medicine information in the openFDA drug-label database.",
    version="1.0.0",
    lifespan=lifespan
)

if PUBLIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(PUBLIC_DIR)), name="static")

# --- [6] Error Handlers ---
@app.exception_handler(MedicineLookupError)
async def lookup_error_handler(request: Request, exc: MedicineLookupError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logging.error(f"Server error: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})

# --- [7] API Endpoints ---
@app.get("/", include_in_schema=False)
def read_root():
    index_path = PUBLIC_DIR / "index.html"
    if not index_path.exists():
        raise HTTPException(status_code=404)
    return FileResponse(index_path)

@app.get("/health", response_model=HealthResponse, tags=["System"])
def health_check() -> HealthResponse:
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(status="OK", timestamp=timestamp)

@app.get(
    "/api/medicine",
    response_model=MedicineInfo,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse},
               500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    tags=["Medicine"],
)
def get_medicine(
    name: Optional[str] = Query(None, description="Brand or generic medicine name."),
    client: Optional[BaseLabelClient] = Depends(get_label_client),
) -> MedicineInfo:
    # Blocking upstream calls; FastAPI runs this handler in its threadpool
    return MedicineInfo(**search_medicine(name, client))

@app.get("/api/suggestions", response_model=SuggestionsResponse, tags=["Medicine"])
def get_suggestions(q: Optional[str] = Query(None, description="Partial medicine name.")) -> SuggestionsResponse:
    return SuggestionsResponse(suggestions=suggest_medicines(q))

def run():
    uvicorn.run(app, host="0.0.0.0", port=PORT)

if __name__ == "__main__":
    run()
