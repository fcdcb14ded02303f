import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import init_db

# --- IMPORT ROUTERS (APIs) ---
from routers import students, payments, meta

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# --- CREATE DATABASE TABLES ---
init_db()

app = FastAPI(title="School Fees ERP")

# ==========================================
# ✅ CORS MIDDLEWARE (Frontend Allowed)
# ==========================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==========================================
# ✅ ERROR HANDLERS
# ==========================================
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Missing or invalid fields", "detail": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})

# --- REGISTER ROUTERS ---
app.include_router(students.router)
app.include_router(payments.router)
app.include_router(meta.router)


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.APP_ENV}
