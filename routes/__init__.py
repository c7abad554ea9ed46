from .health import router as health_router
from .stt import router as stt_router

__all__ = ["health_router", "stt_router"]
