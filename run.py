"""
Start the API with uvicorn. HOST, PORT, DEBUG and LOG_LEVEL come from the
environment or .env (see config.Settings); DEBUG turns on auto-reload.
Usage: python3 run.py   (from the project root)
"""
import uvicorn

from config import settings

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
