"""
Tests unitaires pour la configuration des sorties de log.

Verifie:
- Le fichier JSON recoit tous les niveaux
- Le fichier de limitation ne recoit que les messages marques "throttle"
- Les pauses 429 du coeur de retry sont marquees
"""

import json
import sys
from pathlib import Path

import httpx
import pytest
import respx
from loguru import logger

from tmdbnet.adapters.api.retry import request_with_retry
from tmdbnet.logging_config import (
    THROTTLE_EVENT,
    configure_logging,
    is_throttle_record,
)
from tests.fixtures.throttle import RecordingSleep

URL = "https://api.example.com/3/movie/550"


@pytest.fixture(autouse=True)
def restore_loguru():
    """Remet le sink stderr par defaut apres chaque test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestIsThrottleRecord:
    def test_marked_record(self) -> None:
        assert is_throttle_record({"extra": {"event": THROTTLE_EVENT}})

    def test_unmarked_record(self) -> None:
        assert not is_throttle_record({"extra": {}})
        assert not is_throttle_record({"extra": {"event": "other"}})


class TestConfigureLogging:
    def test_json_file_receives_debug(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "tmdbnet.log"
        configure_logging(log_level="WARNING", log_file=log_file)

        logger.debug("message de test")
        logger.complete()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        messages = [json.loads(line)["record"]["message"] for line in lines]
        assert "message de test" in messages

    def test_throttle_file_only_gets_marked_records(self, tmp_path: Path) -> None:
        throttle_file = tmp_path / "throttle.log"
        configure_logging(
            log_level="WARNING",
            log_file=tmp_path / "tmdbnet.log",
            throttle_log_file=throttle_file,
        )

        logger.info("message ordinaire")
        logger.bind(event=THROTTLE_EVENT).warning("pause de limitation")
        logger.complete()

        content = throttle_file.read_text(encoding="utf-8")
        assert "pause de limitation" in content
        assert "message ordinaire" not in content
        assert "Sorties de log" not in content

    def test_no_throttle_file_by_default(self, tmp_path: Path) -> None:
        configure_logging(log_file=tmp_path / "tmdbnet.log")

        assert [path.name for path in tmp_path.iterdir()] == ["tmdbnet.log"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_retry_pauses_are_marked(self, tmp_path: Path) -> None:
        throttle_file = tmp_path / "throttle.log"
        configure_logging(
            log_level="ERROR",
            log_file=tmp_path / "tmdbnet.log",
            throttle_log_file=throttle_file,
        )
        respx.get(URL).mock(
            side_effect=[
                httpx.Response(429, headers={"Retry-After": "0"}),
                httpx.Response(200, json={}),
            ]
        )

        async with httpx.AsyncClient() as client:
            await request_with_retry(client, "GET", URL, sleep=RecordingSleep())
        await logger.complete()

        assert "Requete limitee (429)" in throttle_file.read_text(encoding="utf-8")
