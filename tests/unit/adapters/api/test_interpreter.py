"""
Tests unitaires pour l'interpretation des reponses terminales.
"""

import httpx
import pytest

from tmdbnet.adapters.api.errors import ServiceRequestError
from tmdbnet.adapters.api.interpreter import ResponseInterpreter
from tmdbnet.adapters.api.resolver import ResourceResolver
from tmdbnet.core.entities import Movie, Person, Resource, Resources, Show, Status
from tests.fixtures.tmdb_responses import (
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_MULTI_SEARCH_RESPONSE,
    TMDB_NOT_FOUND_RESPONSE,
)


@pytest.fixture
def interpreter() -> ResponseInterpreter:
    return ResponseInterpreter()


class TestSuccessfulResponses:
    """Tests pour les reponses en succes."""

    def test_reads_model(self, interpreter: ResponseInterpreter) -> None:
        response = httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)

        movie = interpreter.read(response, Movie)

        assert isinstance(movie, Movie)
        assert movie.title == "Avatar"
        assert movie.tag_line == "Entrez dans un nouveau monde."

    def test_reads_polymorphic_page(self, interpreter: ResponseInterpreter) -> None:
        response = httpx.Response(200, json=TMDB_MULTI_SEARCH_RESPONSE)

        page = interpreter.read(response, Resources)

        assert [type(item) for item in page.results] == [Movie, Show, Person, Resource]
        assert page.page_count == 3

    def test_reads_builtin_types(self, interpreter: ResponseInterpreter) -> None:
        response = httpx.Response(200, json=[{"FR": ["Europe/Paris"]}])

        result = interpreter.read(response, list[dict[str, list[str]]])

        assert result == [{"FR": ["Europe/Paris"]}]

    def test_empty_body_gives_default_model(self, interpreter: ResponseInterpreter) -> None:
        response = httpx.Response(204)

        status = interpreter.read(response, Status)

        assert status.code == 0
        assert status.succeeded is False

    def test_unreadable_body_gives_default_model(
        self, interpreter: ResponseInterpreter
    ) -> None:
        response = httpx.Response(200, text="not json")

        movie = interpreter.read(response, Movie)

        assert movie.id == 0
        assert movie.title is None

    def test_unexpected_shape_gives_empty_list(self, interpreter: ResponseInterpreter) -> None:
        response = httpx.Response(200, json={"unexpected": 1})

        result = interpreter.read(response, list[dict[str, list[str]]])

        assert result == []

    def test_empty_body_gives_empty_list(self, interpreter: ResponseInterpreter) -> None:
        response = httpx.Response(200)

        assert interpreter.read(response, list[dict[str, list[str]]]) == []

    def test_unexpected_shape_gives_empty_dict(self, interpreter: ResponseInterpreter) -> None:
        response = httpx.Response(200, json=["FR", "DE"])

        assert interpreter.read(response, dict[str, int]) == {}

    def test_custom_resolver_is_used(self) -> None:
        resolver = ResourceResolver({"movie": Movie})
        interpreter = ResponseInterpreter(resolver)
        response = httpx.Response(200, json=TMDB_MULTI_SEARCH_RESPONSE)

        page = interpreter.read(response, Resources)

        assert [type(item) for item in page.results] == [
            Movie,
            Resource,
            Resource,
            Resource,
        ]


class TestFailedResponses:
    """Tests pour les reponses en echec."""

    def test_error_status_raises_service_error(
        self, interpreter: ResponseInterpreter
    ) -> None:
        response = httpx.Response(404, json=TMDB_NOT_FOUND_RESPONSE)

        with pytest.raises(ServiceRequestError) as exc_info:
            interpreter.read(response, Movie)

        assert exc_info.value.status_code == 404
        assert exc_info.value.service_code == 34

    def test_redirect_status_is_not_success(self, interpreter: ResponseInterpreter) -> None:
        response = httpx.Response(301, headers={"Location": "https://example.com"})

        with pytest.raises(ServiceRequestError) as exc_info:
            interpreter.read(response, Movie)

        assert exc_info.value.status_code == 301
