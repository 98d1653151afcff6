"""Configuration du système de logging centralisé."""

import glob
import logging
import logging.handlers
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from cube_api.core.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _rotating_handler(filename: Path, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=filename,
        when="midnight",
        interval=1,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"
    handler.setFormatter(formatter)
    return handler


def setup_logging(logs_dir: str | Path, retention_days: int = 30) -> tuple[logging.Logger, logging.Logger]:
    """Configure le système de logging avec rotation quotidienne.

    Description:
        Crée le dossier de logs, purge les fichiers trop anciens puis attache un
        handler rotatif (minuit) à chacun des deux loggers de l'application.

    Args:
        logs_dir (str | Path): Dossier de destination des fichiers de log.
        retention_days (int): Nombre de jours conservés lors de la purge.

    Returns:
        tuple: (logger_generic, logger_errors)
    """
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    cleanup_old_logs(logs_dir, retention_days=retention_days)

    formatter = logging.Formatter(LOG_FORMAT)

    # Logger générique (INFO+)
    generic_logger = logging.getLogger("cube_api.generic")
    generic_logger.setLevel(logging.INFO)
    if not generic_logger.handlers:  # Éviter les doublons
        generic_logger.addHandler(_rotating_handler(logs_dir / "generic.log", formatter))

    # Logger erreurs (ERROR+)
    error_logger = logging.getLogger("cube_api.errors")
    error_logger.setLevel(logging.ERROR)
    if not error_logger.handlers:
        error_logger.addHandler(_rotating_handler(logs_dir / "errors.log", formatter))

    return generic_logger, error_logger


def cleanup_old_logs(logs_dir: Path, retention_days: int = 30) -> list[str]:
    """Supprime les fichiers de log rotés plus anciens que `retention_days`.

    Description:
        Les fichiers rotés portent un suffixe `YYYY-MM-DD` (ex. `generic.log.2026-01-31`).
        Les fichiers courants (sans date) ne sont jamais supprimés.

    Returns:
        list[str]: Chemins des fichiers supprimés.
    """
    cutoff_str = (datetime.now() - timedelta(days=retention_days)).strftime("%Y-%m-%d")
    removed: list[str] = []

    for pattern in (f"{logs_dir}/generic.log.*", f"{logs_dir}/errors.log.*"):
        for file_path in glob.glob(pattern):
            date_part = os.path.basename(file_path).rsplit(".", 1)[-1]
            if len(date_part) != 10 or date_part.count("-") != 2:
                continue
            if date_part < cutoff_str:
                try:
                    os.remove(file_path)
                except OSError:
                    continue
                removed.append(file_path)

    return removed


# Instance globale (lazy initialization)
_loggers: Optional[tuple[logging.Logger, logging.Logger]] = None


def get_loggers() -> tuple[logging.Logger, logging.Logger]:
    """Retourne les loggers configurés (initialisés au premier appel)."""
    global _loggers
    if _loggers is None:
        settings = get_settings()
        _loggers = setup_logging(settings.logs_dir, settings.log_retention_days)
    return _loggers
