from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
import logging
import uvicorn

from . import routers
from .database import get_db, init_db, check_db_connection

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Rental Datamart API",
    description="Vacation-rental marketplace data model",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:7860", "http://127.0.0.1:7860"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Create missing tables when the app starts"""
    logger.info("Starting Rental Datamart API...")
    init_db()


# Include routers
app.include_router(routers.guests.router, prefix="/api")
app.include_router(routers.properties.router, prefix="/api")
app.include_router(routers.bookings.router, prefix="/api")
app.include_router(routers.feedback.router, prefix="/api")
app.include_router(routers.reports.router, prefix="/api/reports")


@app.get("/")
async def root():
    return {"message": "Welcome to Rental Datamart API", "status": "running"}


@app.get("/health")
async def health_check(db: Session = Depends(get_db)):
    connection = check_db_connection(db.get_bind())
    return {
        "status": "healthy" if connection["sqlalchemy"] else "degraded",
        "service": "rental-datamart-api",
        "version": "1.0.0",
        "database": connection,
    }


if __name__ == "__main__":
    uvicorn.run("datamart.main:app", host="0.0.0.0", port=8000, reload=True)
