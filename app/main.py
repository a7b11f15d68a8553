from fastapi import FastAPI
from loguru import logger

from app.core.logging import setup_logging
from app.core.init_db import init_db
from app.core.errors import register_exception_handlers
from app.modules.users.router import router as users_router
from app.modules.media.router import router as media_router
from app.modules.favorites.router import router as favorites_router

setup_logging()
logger.info("Starting Favorites backend")


app = FastAPI(
    title="Favorites Backend",
    version="0.1.0"
)

register_exception_handlers(app)

app.include_router(users_router)
app.include_router(media_router)
# Favorites are nested under /users/{user_id}
app.include_router(favorites_router)

# Init DB after app is created
init_db()

@app.get("/health")
def health():
    logger.debug("Health check hit")
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
