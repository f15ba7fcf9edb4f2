"""Main entry point for the server."""

import logging
import os

import uvicorn
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, ".env"))

APP_PORT = int(os.getenv("APP_PORT", "8000"))
APP_WORKERS = int(os.getenv("APP_WORKERS", "1"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    print("Starting server...")
    uvicorn.run("userpic:app", host="0.0.0.0", port=APP_PORT, workers=APP_WORKERS, reload=False)
