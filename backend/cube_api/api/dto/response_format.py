from typing import Any, Union

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Format standardisé pour les réponses d'erreur."""

    success: bool = False
    error: dict[str, Any]

    @classmethod
    def from_detail(cls, detail: Union[str, dict[str, Any]], code: str = "INTERNAL_ERROR"):
        """Créer une réponse d'erreur à partir d'un détail."""
        if isinstance(detail, str):
            return cls(error={"code": code, "message": detail})
        return cls(error={"code": code, **detail})
