from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from ..core.logging import setup_logging
from ..core.config import settings
from .routers import health, ocr, pages

logger = setup_logging()
app = FastAPI(title="OCR Facturas")


# Add custom exception handler for validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # "input" and "ctx" can hold bytes, UploadFile or exception objects
    return [{k: err[k] for k in ("loc", "msg", "type") if k in err} for err in exc.errors()]


# Configure CORS to allow frontend access
# CORS_ORIGINS can be set in .env as comma-separated list
# Example: CORS_ORIGINS=http://localhost:3000,https://your-frontend.com
allowed_origins = [origin.strip() for origin in settings.cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(ocr.router)
app.include_router(pages.router)
