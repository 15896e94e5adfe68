#!/usr/bin/env python3
"""
FastAPI server runner for the Trip Budget backend
"""

import uvicorn

from tripbudget.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "tripbudget.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
