#!/usr/bin/env python3
"""Start the Floor Plan Engine API server."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "floorplan_engine.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["floorplan_engine"],
    )
