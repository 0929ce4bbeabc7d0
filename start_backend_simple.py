#!/usr/bin/env python3
"""
Simple Backend Starter
Starts the FastAPI backend with proper imports
"""

import logging
import uvicorn
import os
import sys

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    # Run from the project root so the package and .env resolve
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)
    sys.path.insert(0, script_dir)

    logger.info(f"Starting Rental Datamart API from: {script_dir}")
    logger.info("API docs will be available at: http://localhost:8000/docs")

    uvicorn.run(
        "datamart.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["./datamart"],
    )
