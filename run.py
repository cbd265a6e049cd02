#!/usr/bin/env python3
"""Run the VelocityIQ API server."""
import uvicorn

from velocityiq.api.dependencies import get_config

if __name__ == "__main__":
    config = get_config()
    uvicorn.run(
        "velocityiq.main:app",
        host=config.server.host,
        port=config.server.port,
        log_level=config.log_level.lower(),
        reload=config.server.reload,
    )
