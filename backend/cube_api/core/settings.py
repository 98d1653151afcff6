# backend/cube_api/core/settings.py
# Configuration de l'API lue depuis l'environnement (et le fichier .env s'il existe).

from functools import lru_cache

from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich import print


class Settings(BaseSettings):
    # === App settings ===
    app_name: str = "Cube API"
    environment: str = "development"  # or "production"
    api_version: str = "0.1.0"

    # === MongoDB ===
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "cubes"
    mongodb_collection: str = "cubes"
    ensure_indexes_on_startup: bool = True

    # === Erreurs ===
    # True => lectures/suppressions sans correspondance renvoient 404 au lieu de 500
    distinct_not_found: bool = False

    # === LOGS ===
    logs_dir: str = "logs"
    log_retention_days: int = 30

    # UPLOAD
    one_mb: int = 1024 * 1024
    max_body_mb: int = 1

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def max_body_bytes(self) -> int:
        return self.max_body_mb * self.one_mb


@lru_cache
def get_settings() -> Settings:
    """Retourne l'instance unique des settings (chargée au premier appel)."""
    settings = Settings()
    print(f"--- Settings loaded ({settings.environment}) ---")
    return settings


def get_app_settings(request: Request) -> Settings:
    """Dépendance FastAPI : settings de l'application courante (`app.state.settings`)."""
    return getattr(request.app.state, "settings", None) or get_settings()
