"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI

from log_config import setup_logging
from routes import health_router, stt_router

patch_all()
setup_logging()

app = FastAPI(title="YouTube Speech-to-Text Relay")
app.include_router(stt_router)
app.include_router(health_router)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
