"""
Configuration de la bibliothèque et de la CLI via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TMDBNET_,
et peut optionnellement être fournie via un fichier .env.

La clé API est optionnelle - les commandes API sont désactivées si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de tmdbnet/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TMDBNET_.
    Exemple : TMDBNET_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDBNET_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Clé API v3 (OPTIONNELLE - commandes API désactivées si non définie)
    api_key: Optional[str] = Field(default=None)

    # Service
    base_url: str = Field(default="https://api.themoviedb.org/3")
    image_base_url: str = Field(default="https://image.tmdb.org/t/p/")
    request_timeout: float = Field(default=30.0, gt=0)
    # Plafond de tentatives sur 429 (None = illimité)
    max_throttle_attempts: Optional[int] = Field(default=None, ge=1)
    language: Optional[str] = Field(default=None)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/tmdbnet.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)
    # Fichier dédié aux pauses de limitation (None = désactivé)
    throttle_log_file: Optional[Path] = Field(default=None)

    @field_validator("log_file", "throttle_log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @property
    def api_enabled(self) -> bool:
        """Vérifie si la clé API est configurée."""
        return bool(self.api_key)
