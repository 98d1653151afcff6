# backend/main.py
# Point d'entrée ASGI : `uvicorn main:app` depuis le dossier backend/.

from cube_api.main import app

__all__ = ["app"]
