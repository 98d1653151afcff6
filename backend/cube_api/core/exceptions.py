# backend/cube_api/core/exceptions.py
# Taxonomie des erreurs métier, convertie en réponses HTTP par exception_handlers.py.

from fastapi import status


class CubeApiError(Exception):
    """Erreur de base de l'API.

    Attributes:
        status_code (int): Code HTTP associé.
        code (str): Code d'erreur exposé dans `ErrorResponse`.
        message (str): Message lisible.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)
        self.message = message


class InvalidRequestError(CubeApiError):
    """Paramètre requis vide ou identifiant mal formé (détecté avant tout accès à la base)."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_REQUEST"


class CubeNotFoundError(CubeApiError):
    """Aucun cube ne correspond au critère."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, message: str = "Cube not found"):
        super().__init__(message)


class StoreError(CubeApiError):
    """Échec générique de l'opération côté base.

    Description:
        Encapsule les erreurs du driver (connexion, requête invalide, timeout...) ainsi que
        les cas « aucune correspondance » pour les lectures et suppressions.
    """

    code = "STORE_ERROR"

    def __init__(self, message: str = "Operation failed"):
        super().__init__(message)
