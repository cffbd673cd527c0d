"""Run the catalog API with uvicorn.

Run via: python -m src
"""

import uvicorn

from src.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "src.app:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level,
        reload=settings.environment == "development",
    )
