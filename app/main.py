import logging
import os
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from app.routes import (
    dashboard_router,
    accounts_router,
    contacts_router,
    leads_router,
    opportunities_router,
)
from app.database import init_db, DATABASE_URL
from app.services.errors import CRMError

# Setup logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Sales CRM",
    description="Leads, accounts, contacts and opportunities kept in sync",
    version="1.0.0"
)

# Include routers
app.include_router(dashboard_router)
app.include_router(accounts_router)
app.include_router(contacts_router)
app.include_router(leads_router)
app.include_router(opportunities_router)


@app.on_event("startup")
def on_startup():
    """Ensure DB is reachable and initialized at startup. If initialization
    fails the app will raise and stop with a clear error message.
    """
    try:
        init_db()
    except Exception as e:
        raise RuntimeError(
            f"Database initialization failed for DATABASE_URL={DATABASE_URL}: {e}"
        ) from e


@app.get("/health")
async def health():
    return {"status": "ok"}


# Error handlers
@app.exception_handler(CRMError)
async def crm_error_handler(request: Request, exc: CRMError):
    """Map service error kinds to HTTP responses."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "error": type(exc).__name__},
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=True)
