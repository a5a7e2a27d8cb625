from pydantic_settings import BaseSettings
from functools import lru_cache
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "Todo Relay API"
    VERSION: str = "0.1.0"
    GRAPHQL_PATH: str = os.getenv("GRAPHQL_PATH", "/graphql")
    GRAPHIQL: bool = os.getenv("GRAPHIQL", "True").lower() in ("true", "1", "t")

    # The single, fixed viewer every request acts as
    VIEWER_ID: str = os.getenv("VIEWER_ID", "me")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # Comma separated
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")

    class Config:
        case_sensitive = True

@lru_cache()
def get_settings() -> Settings:
    return Settings()
