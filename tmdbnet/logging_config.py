"""
Configuration des sorties loguru pour le client tmdbnet.

Les modules du package journalisent via `loguru.logger` sous l'espace de
noms `tmdbnet` sans jamais ajouter de sink; c'est à l'application hôte
(ou à la CLI) d'appeler `configure_logging`.

Sorties installées :
- console : messages du package, colorés, au niveau demandé
- fichier : tous les messages en JSON, avec rotation
- fichier de limitation (optionnel) : uniquement les pauses 429 et les
  attentes de quota, marquées `event="throttle"` par le coeur de retry

Le marquage se fait avec `logger.bind(event=THROTTLE_EVENT)`.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LIBRARY_NAMESPACE = "tmdbnet"
THROTTLE_EVENT = "throttle"


def is_throttle_record(record: dict) -> bool:
    """Vrai pour les messages émis lors d'une pause de limitation."""
    return record["extra"].get("event") == THROTTLE_EVENT


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/tmdbnet.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    throttle_log_file: Optional[Path] = None,
) -> None:
    """Installe les sorties de log et active l'espace de noms du package.

    Args :
        log_level : Niveau minimum affiché sur la console
        log_file : Fichier JSON recevant tous les niveaux
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
        throttle_log_file : Fichier dédié aux pauses 429 et de quota (None = aucun)
    """
    logger.remove()
    logger.enable(LIBRARY_NAMESPACE)

    logger.add(
        sys.stderr,
        level=log_level,
        filter=LIBRARY_NAMESPACE,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{module}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Les pauses de quota sont en DEBUG : le fichier capture tout
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    if throttle_log_file is not None:
        throttle_log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            throttle_log_file,
            level="DEBUG",
            filter=is_throttle_record,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}",
            rotation=rotation_size,
            retention=retention_count,
            enqueue=True,
        )

    logger.debug(
        "Sorties de log installées",
        log_file=str(log_file),
        throttle_log_file=str(throttle_log_file) if throttle_log_file else None,
    )
