"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn messenger.fastapi_app:app --host 0.0.0.0 --port 9000 --reload
"""

import uvicorn

from messenger.config.settings import get_config


def uvicorn_options(config) -> dict:
    """Server options for the selected configuration class."""
    return {
        "host": config.HOST,
        "port": config.PORT,
        "reload": config.DEBUG,
        "log_level": "info" if config.DEBUG else "warning",
    }


if __name__ == "__main__":
    config = get_config()
    options = uvicorn_options(config)

    print(f"Starting FastAPI application in {config.APP_ENV} mode...")
    print(f"Server running on http://{options['host']}:{options['port']}")
    print(f"API docs available at http://{options['host']}:{options['port']}/docs")

    uvicorn.run("messenger.fastapi_app:app", **options)
