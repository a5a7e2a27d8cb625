import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from todo_api.api.graphql.router import create_graphql_router
from todo_api.core.config import get_settings
from todo_api.db.base import create_store
from todo_api.db.store import TodoStore

settings = get_settings()

def create_app(store: Optional[TodoStore] = None) -> FastAPI:
    """Build the API around `store`, or around a fresh in-memory store."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    graphql_router = create_graphql_router(store or create_store(), graphiql=settings.GRAPHIQL)
    app.include_router(graphql_router, prefix=settings.GRAPHQL_PATH, tags=["graphql"])

    @app.get("/", tags=["Root"])
    async def read_root():
        return {"message": f"Welcome to the {settings.PROJECT_NAME}"}

    return app

app = create_app()

# Optional: Add logic to run the server directly for development
if __name__ == "__main__":
    uvicorn.run("todo_api.server:app", host="0.0.0.0", port=8000, reload=True)
