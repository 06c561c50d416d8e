"""
Fixtures pytest partagees pour les tests tmdbnet.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Sleep factice enregistrant les pauses de limitation
- Mock de l'executeur de requetes pour les facades
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from tmdbnet.config import Settings
from tmdbnet.core.ports import IRequestExecutor
from tests.fixtures.throttle import RecordingSleep

API_KEY = "test_api_key"
BASE_URL = "https://api.themoviedb.org/3"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test isoles de l'environnement.

    Utilise tmp_path de pytest pour le fichier de log.
    """
    return Settings(
        _env_file=None,  # Ignorer le fichier .env pour les tests
        api_key=API_KEY,
        base_url=BASE_URL,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def mock_executor() -> AsyncMock:
    """
    Mock de IRequestExecutor pour les tests des facades.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    return AsyncMock(spec=IRequestExecutor)
