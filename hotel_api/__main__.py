"""
Run the API with uvicorn.

Usage:
    python -m hotel_api

Host, port and log level come from Settings (HOST, PORT, LOG_LEVEL).
"""
import uvicorn

from hotel_api.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "hotel_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
