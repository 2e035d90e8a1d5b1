from deckcomposer.api.composer import router as composer_router
from deckcomposer.api.health import router as health_router

__all__ = [
    "composer_router",
    "health_router",
]
