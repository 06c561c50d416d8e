"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- search: tableau des resultats polymorphes, page vide
- movie / person: fiches detaillees
- find: resultat, absence de resultat, source invalide
- download: fichier temporaire renomme, fichier existant preserve, erreurs reseau
- cle API absente et erreurs du service (code de sortie 1)
- info / version via CliRunner
"""

import io
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
import typer
from typer.testing import CliRunner

from tmdbnet import __version__
from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.adapters.cli.commands.download_command import _download_async
from tmdbnet.adapters.cli.commands.lookup_commands import (
    _describe,
    _find_async,
    _movie_async,
    _person_async,
    _render_resources,
    _search_async,
)
from tmdbnet.adapters.cli.helpers import format_year
from tmdbnet.core.entities import (
    Episode,
    MediaCast,
    MediaCredits,
    Movie,
    Person,
    Resource,
    Resources,
    Show,
)
from tmdbnet.main import app

# Chemins de patch des sous-modules de commandes
_LOOKUP = "tmdbnet.adapters.cli.commands.lookup_commands"
_DOWNLOAD = "tmdbnet.adapters.cli.commands.download_command"
_HELPERS = "tmdbnet.adapters.cli.helpers"

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> AsyncMock:
    """Client du service simule."""
    return AsyncMock()


@pytest.fixture
def mock_container(mock_client: AsyncMock):
    """Mock le Container pour les tests.

    Patche Container dans helpers.py car c'est la que le decorateur
    @with_container() l'importe et l'instancie.
    """
    with patch(f"{_HELPERS}.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.config.return_value = MagicMock(api_enabled=True, language=None)
        container_instance.service_client.return_value = mock_client
        yield container_instance


def printed(mock_console: MagicMock) -> str:
    """Concatene tous les appels a console.print."""
    return "\n".join(str(call) for call in mock_console.print.call_args_list)


# ============================================================================
# Helpers d'affichage
# ============================================================================


class TestDescribe:
    def test_movie(self) -> None:
        movie = Movie(id=1, title="Alien", release_date=date(1979, 5, 25))
        assert _describe(movie) == ("Film", "Alien", "1979")

    def test_show_without_date(self) -> None:
        assert _describe(Show(id=2, name="Dark")) == ("Serie", "Dark", "-")

    def test_person(self) -> None:
        person = Person(id=3, name="Ridley Scott", known_for_department="Directing")
        assert _describe(person) == ("Personne", "Ridley Scott", "Directing")

    def test_episode(self) -> None:
        episode = Episode(id=4, name="Pilot", air_date=date(2008, 1, 20))
        assert _describe(episode) == ("Episode", "Pilot", "2008")

    def test_unknown_resource(self) -> None:
        assert _describe(Resource(id=5, media_type="collection")) == ("collection", "?", "-")

    def test_format_year(self) -> None:
        assert format_year(date(2009, 12, 15)) == "2009"
        assert format_year(None) == "-"

    def test_render_resources_title(self) -> None:
        page = Resources(page_index=1, page_count=3, total_count=54)
        table = _render_resources(page)
        assert table.title == "Page 1/3 (54 resultats)"


# ============================================================================
# Commandes de consultation
# ============================================================================


class TestSearchCommand:
    @pytest.mark.asyncio
    async def test_search_prints_table(self, mock_container, mock_client) -> None:
        mock_client.search.return_value = Resources(
            results=[Movie(id=19995, title="Avatar")], page_index=1, page_count=1, total_count=1
        )

        with patch(f"{_LOOKUP}.console") as mock_console, patch(f"{_LOOKUP}.Status"):
            await _search_async("Avatar", "fr", 1)

        mock_client.search.assert_awaited_once_with("Avatar", language="fr", page=1)
        mock_console.print.assert_called_once()
        mock_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_search_uses_configured_language(self, mock_container, mock_client) -> None:
        mock_container.config.return_value.language = "de"
        mock_client.search.return_value = Resources()

        with patch(f"{_LOOKUP}.console"), patch(f"{_LOOKUP}.Status"):
            await _search_async("Avatar", None, 2)

        mock_client.search.assert_awaited_once_with("Avatar", language="de", page=2)

    @pytest.mark.asyncio
    async def test_search_without_results(self, mock_container, mock_client) -> None:
        mock_client.search.return_value = Resources()

        with patch(f"{_LOOKUP}.console") as mock_console, patch(f"{_LOOKUP}.Status"):
            await _search_async("zzzz", None, 1)

        assert "Aucun resultat" in printed(mock_console)

    @pytest.mark.asyncio
    async def test_missing_api_key_exits(self, mock_container, mock_client) -> None:
        mock_container.config.return_value.api_enabled = False

        with patch(f"{_HELPERS}.console") as mock_console:
            with pytest.raises(typer.Exit) as exc_info:
                await _search_async("Avatar", None, 1)

        assert exc_info.value.exit_code == 1
        assert "Cle API absente" in printed(mock_console)
        mock_client.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_service_error_exits_and_closes_client(
        self, mock_container, mock_client
    ) -> None:
        mock_client.search.side_effect = ServiceRequestError(401, 7, "Invalid API key")

        with patch(f"{_HELPERS}.console") as mock_console, patch(f"{_LOOKUP}.Status"):
            with pytest.raises(typer.Exit) as exc_info:
                await _search_async("Avatar", None, 1)

        assert exc_info.value.exit_code == 1
        assert "Invalid API key" in printed(mock_console)
        mock_client.close.assert_awaited_once()


class TestMovieCommand:
    @pytest.mark.asyncio
    async def test_movie_full_requests_appendices(self, mock_container, mock_client) -> None:
        mock_client.movies.get.return_value = Movie(
            id=348,
            title="Alien",
            tag_line="Dans l'espace, personne ne vous entend crier.",
            credits=MediaCredits(cast=[MediaCast(id=10205, name="Sigourney Weaver")]),
        )

        with patch(f"{_LOOKUP}.console") as mock_console:
            await _movie_async(348, "fr", True)

        mock_client.movies.get.assert_awaited_once_with(348, language="fr", append_all=True)
        panel = mock_console.print.call_args.args[0]
        assert "Sigourney Weaver" in panel.renderable
        assert "Dans l'espace" in panel.renderable

    @pytest.mark.asyncio
    async def test_person_panel(self, mock_container, mock_client) -> None:
        mock_client.people.get.return_value = Person(
            id=2710,
            name="James Cameron",
            birth_day="1954-08-16",
            birth_place="Kapuskasing, Ontario, Canada",
        )

        with patch(f"{_LOOKUP}.console") as mock_console:
            await _person_async(2710)

        panel = mock_console.print.call_args.args[0]
        assert "Naissance : 1954-08-16 (Kapuskasing, Ontario, Canada)" in panel.renderable


class TestFindCommand:
    @pytest.mark.asyncio
    async def test_find_prints_resource(self, mock_container, mock_client) -> None:
        mock_client.find.return_value = Movie(id=19995, title="Avatar")

        with patch(f"{_LOOKUP}.console") as mock_console:
            await _find_async("tt0499549", "imdb_id")

        mock_client.find.assert_awaited_once_with("tt0499549", "imdb_id")
        assert "Avatar" in printed(mock_console)

    @pytest.mark.asyncio
    async def test_find_without_result(self, mock_container, mock_client) -> None:
        mock_client.find.return_value = None

        with patch(f"{_LOOKUP}.console") as mock_console:
            await _find_async("tt0000000", "imdb_id")

        assert "Aucune ressource pour tt0000000" in printed(mock_console)

    @pytest.mark.asyncio
    async def test_find_invalid_source_exits(self, mock_container, mock_client) -> None:
        mock_client.find.side_effect = ValueError("Unsupported external source: 'x'")

        with patch(f"{_LOOKUP}.console") as mock_console:
            with pytest.raises(typer.Exit) as exc_info:
                await _find_async("tt0499549", "x")

        assert exc_info.value.exit_code == 1
        assert "Argument invalide" in printed(mock_console)
        mock_client.close.assert_awaited_once()


# ============================================================================
# Telechargement
# ============================================================================


class TestDownloadCommand:
    @pytest.mark.asyncio
    async def test_download_writes_file(self, mock_container, tmp_path: Path) -> None:
        storage = AsyncMock()

        async def fake_download(file_path: str, sink: io.BufferedWriter, size: str) -> int:
            sink.write(b"image")
            return 5

        storage.download.side_effect = fake_download
        mock_container.storage_client.return_value = storage
        output = tmp_path / "posters" / "avatar.jpg"

        with patch(f"{_DOWNLOAD}.console") as mock_console, patch(f"{_DOWNLOAD}.Status"):
            await _download_async("/abc.jpg", output, "w500")

        assert output.read_bytes() == b"image"
        assert "5 octets" in printed(mock_console)
        storage.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_download_error_removes_file(self, mock_container, tmp_path: Path) -> None:
        storage = AsyncMock()
        storage.download.side_effect = ServiceRequestError(404, 0, "Not Found")
        mock_container.storage_client.return_value = storage
        output = tmp_path / "missing.jpg"

        with patch(f"{_DOWNLOAD}.console") as mock_console, patch(f"{_DOWNLOAD}.Status"):
            with pytest.raises(typer.Exit) as exc_info:
                await _download_async("/missing.jpg", output, "original")

        assert exc_info.value.exit_code == 1
        assert not output.exists()
        assert list(tmp_path.iterdir()) == []
        assert "404" in printed(mock_console)
        storage.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_download_error_keeps_existing_file(
        self, mock_container, tmp_path: Path
    ) -> None:
        storage = AsyncMock()
        storage.download.side_effect = ServiceRequestError(404, 0, "Not Found")
        mock_container.storage_client.return_value = storage
        output = tmp_path / "avatar.jpg"
        output.write_bytes(b"ancienne image")

        with patch(f"{_DOWNLOAD}.console"), patch(f"{_DOWNLOAD}.Status"):
            with pytest.raises(typer.Exit):
                await _download_async("/missing.jpg", output, "w500")

        assert output.read_bytes() == b"ancienne image"
        assert [path.name for path in tmp_path.iterdir()] == ["avatar.jpg"]

    @pytest.mark.asyncio
    async def test_download_replaces_existing_file(
        self, mock_container, tmp_path: Path
    ) -> None:
        storage = AsyncMock()

        async def fake_download(file_path: str, sink: io.BufferedWriter, size: str) -> int:
            sink.write(b"nouvelle")
            return 8

        storage.download.side_effect = fake_download
        mock_container.storage_client.return_value = storage
        output = tmp_path / "avatar.jpg"
        output.write_bytes(b"ancienne image")

        with patch(f"{_DOWNLOAD}.console"), patch(f"{_DOWNLOAD}.Status"):
            await _download_async("/abc.jpg", output, "w500")

        assert output.read_bytes() == b"nouvelle"
        assert [path.name for path in tmp_path.iterdir()] == ["avatar.jpg"]

    @pytest.mark.asyncio
    async def test_transport_error_exits_without_leftover(
        self, mock_container, tmp_path: Path
    ) -> None:
        storage = AsyncMock()
        storage.download.side_effect = httpx.ConnectError("Connection refused")
        mock_container.storage_client.return_value = storage
        output = tmp_path / "avatar.jpg"

        with patch(f"{_DOWNLOAD}.console") as mock_console, patch(f"{_DOWNLOAD}.Status"):
            with pytest.raises(typer.Exit) as exc_info:
                await _download_async("/abc.jpg", output, "w500")

        assert exc_info.value.exit_code == 1
        assert list(tmp_path.iterdir()) == []
        assert "Erreur reseau" in printed(mock_console)
        storage.close.assert_awaited_once()


# ============================================================================
# Application Typer
# ============================================================================


class TestApp:
    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"tmdbnet v{__version__}" in result.output

    def test_info(self) -> None:
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "API : " in result.output
        assert "Tentatives sur 429" in result.output

    def test_find_command_wiring(self, mock_container, mock_client) -> None:
        mock_client.find.return_value = Movie(id=19995, title="Avatar")

        result = runner.invoke(app, ["find", "tt0499549", "--source", "imdb_id"])

        assert result.exit_code == 0
        assert "Film 19995 : Avatar" in result.output

    def test_missing_api_key_exit_code(self, mock_container) -> None:
        mock_container.config.return_value.api_enabled = False

        result = runner.invoke(app, ["movie", "550"])

        assert result.exit_code == 1
        assert "Cle API absente" in result.output
