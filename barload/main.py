"""
Barbell Plate Loader API - Main Application

Works out which plates go on each side of a barbell for a target weight,
and shows the same load in the other unit system.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barload.core.config import settings
from barload.api import loads, units

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()), format=settings.LOG_FORMAT
)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    ## Barbell Plate Loader API

    Calculate the plates needed to load a barbell.

    ### Features
    - Greedy plate selection from a limited plate inventory
    - Automatic collar handling for light loads
    - kg / lbs conversion with rounding to achievable weights
    - Remainder reporting when the plates cannot reach the target

    ### Core Endpoints
    - `/load/compute` - Plates for one side of the bar
    - `/load/plan` - Primary bar plus the converted bar
    - `/units` - Conversion, rounding and display formatting
    """,
    version="1.0.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(loads.router)
app.include_router(units.router)


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "loads": "/load",
            "units": "/units",
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
