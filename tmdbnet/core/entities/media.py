"""
Modeles des films, series et objets associes.

Chaque champ porte l'alias JSON du service. Les noms des membres sont
la forme snake_case de la table de correspondance publique
(ex: poster_path -> poster, tagline -> tag_line, imdb_id -> imdb).
"""

from datetime import date
from typing import Optional

from pydantic import AliasChoices, Field

from tmdbnet.core.entities.base import PagedResult, Resource, ServiceModel
from tmdbnet.core.entities.common import ExternalIds, Images
from tmdbnet.core.entities.people import Person


class Genre(ServiceModel):
    id: int = 0
    name: Optional[str] = None


class Genres(ServiceModel):
    results: list[Genre] = Field(default_factory=list, alias="genres")


class Country(ServiceModel):
    code: Optional[str] = Field(default=None, alias="iso_3166_1")
    name: Optional[str] = None


class Language(ServiceModel):
    code: Optional[str] = Field(default=None, alias="iso_639_1")
    name: Optional[str] = None
    english_name: Optional[str] = None


class Company(ServiceModel):
    """Societe de production."""

    id: int = 0
    name: Optional[str] = None
    description: Optional[str] = None
    head_quarters: Optional[str] = Field(default=None, alias="headquarters")
    home_page: Optional[str] = Field(default=None, alias="homepage")
    parent: Optional["Company"] = Field(default=None, alias="parent_company")
    logo: Optional[str] = Field(default=None, alias="logo_path")
    origin_country: Optional[str] = None


class Network(ServiceModel):
    """Chaine de diffusion d'une serie."""

    id: int = 0
    name: Optional[str] = None
    head_quarters: Optional[str] = Field(default=None, alias="headquarters")
    home_page: Optional[str] = Field(default=None, alias="homepage")
    logo: Optional[str] = Field(default=None, alias="logo_path")
    origin_country: Optional[str] = None


class Keyword(ServiceModel):
    id: int = 0
    name: Optional[str] = None


class Keywords(ServiceModel):
    # "keywords" pour les films, "results" pour les series
    results: list[Keyword] = Field(
        default_factory=list,
        validation_alias=AliasChoices("keywords", "results"),
    )


class Video(ServiceModel):
    id: Optional[str] = None
    language_code: Optional[str] = Field(default=None, alias="iso_639_1")
    key: Optional[str] = None
    name: Optional[str] = None
    site: Optional[str] = None
    size: int = 0
    type: Optional[str] = None


class Videos(ServiceModel):
    results: list[Video] = Field(default_factory=list)


class Translation(ServiceModel):
    language_code: Optional[str] = Field(default=None, alias="iso_639_1")
    country_code: Optional[str] = Field(default=None, alias="iso_3166_1")
    name: Optional[str] = None
    english_name: Optional[str] = None


class Translations(ServiceModel):
    results: list[Translation] = Field(default_factory=list, alias="translations")


class AlternativeTitle(ServiceModel):
    code: Optional[str] = Field(default=None, alias="iso_3166_1")
    title: Optional[str] = None


class AlternativeTitles(ServiceModel):
    results: list[AlternativeTitle] = Field(default_factory=list, alias="titles")


class CountryRelease(ServiceModel):
    code: Optional[str] = Field(default=None, alias="iso_3166_1")
    certification: Optional[str] = None
    release_date: Optional[date] = None


class Releases(ServiceModel):
    countries: list[CountryRelease] = Field(default_factory=list)


class MediaCredit(ServiceModel):
    """Participation d'une personne a un film ou une serie."""

    id: int = 0
    credit_id: Optional[str] = None
    name: Optional[str] = None
    profile: Optional[str] = Field(default=None, alias="profile_path")


class MediaCast(MediaCredit):
    character: Optional[str] = None
    order: int = 0


class MediaCrew(MediaCredit):
    department: Optional[str] = None
    job: Optional[str] = None


class MediaCredits(ServiceModel):
    cast: list[MediaCast] = Field(default_factory=list)
    crew: list[MediaCrew] = Field(default_factory=list)


class Review(ServiceModel):
    id: Optional[str] = None
    author: Optional[str] = None
    content: Optional[str] = None
    language_code: Optional[str] = Field(default=None, alias="iso_639_1")
    media_id: int = 0
    media_title: Optional[str] = None
    media_type: Optional[str] = None
    url: Optional[str] = None


class Reviews(PagedResult[Review]):
    pass


class Movie(Resource):
    """
    Film, tel que renvoye par les endpoints de detail et de recherche.

    Les sous-objets (credits, images, videos...) ne sont remplis que si
    la requete les a demandes via append_to_response.
    """

    title: Optional[str] = None
    original_title: Optional[str] = None
    original_language: Optional[str] = None
    tag_line: Optional[str] = Field(default=None, alias="tagline")
    overview: Optional[str] = None
    poster: Optional[str] = Field(default=None, alias="poster_path")
    backdrop: Optional[str] = Field(default=None, alias="backdrop_path")
    adult: bool = False
    belongs_to: Optional["Collection"] = Field(
        default=None, alias="belongs_to_collection"
    )
    budget: int = 0
    genres: list[Genre] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)
    home_page: Optional[str] = Field(default=None, alias="homepage")
    imdb: Optional[str] = Field(default=None, alias="imdb_id")
    companies: list[Company] = Field(default_factory=list, alias="production_companies")
    countries: list[Country] = Field(default_factory=list, alias="production_countries")
    release_date: Optional[date] = None
    revenue: int = 0
    runtime: Optional[int] = None
    languages: list[Language] = Field(default_factory=list, alias="spoken_languages")
    alternative_titles: Optional[AlternativeTitles] = None
    credits: Optional[MediaCredits] = None
    images: Optional[Images] = None
    videos: Optional[Videos] = None
    keywords: Optional[Keywords] = None
    releases: Optional[Releases] = None
    translations: Optional[Translations] = None
    reviews: Optional[Reviews] = None
    external_ids: Optional[ExternalIds] = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    rating: Optional[float] = None
    status: Optional[str] = None


class Collection(ServiceModel):
    id: int = 0
    name: Optional[str] = None
    overview: Optional[str] = None
    poster: Optional[str] = Field(default=None, alias="poster_path")
    backdrop: Optional[str] = Field(default=None, alias="backdrop_path")
    parts: list[Movie] = Field(default_factory=list)
    images: Optional[Images] = None


class Episode(Resource):
    name: Optional[str] = None
    overview: Optional[str] = None
    backdrop: Optional[str] = Field(default=None, alias="still_path")
    production_code: Optional[str] = None
    air_date: Optional[date] = None
    season_number: Optional[int] = None
    episode_number: int = 0
    credits: Optional[MediaCredits] = None
    images: Optional[Images] = None
    videos: Optional[Videos] = None
    external_ids: Optional[ExternalIds] = None
    vote_average: float = 0.0
    vote_count: int = 0


class Season(Resource):
    name: Optional[str] = None
    overview: Optional[str] = None
    air_date: Optional[date] = None
    poster: Optional[str] = Field(default=None, alias="poster_path")
    season_number: int = 0
    episode_count: int = 0
    credits: Optional[MediaCredits] = None
    images: Optional[Images] = None
    videos: Optional[Videos] = None
    external_ids: Optional[ExternalIds] = None
    episodes: list[Episode] = Field(default_factory=list)


class Show(Resource):
    """Serie TV."""

    name: Optional[str] = None
    original_name: Optional[str] = None
    original_language: Optional[str] = None
    overview: Optional[str] = None
    poster: Optional[str] = Field(default=None, alias="poster_path")
    backdrop: Optional[str] = Field(default=None, alias="backdrop_path")
    countries: list[str] = Field(default_factory=list, alias="origin_country")
    episode_runtimes: list[int] = Field(default_factory=list, alias="episode_run_time")
    created_by: list[Person] = Field(default_factory=list)
    first_air_date: Optional[date] = None
    last_air_date: Optional[date] = None
    genres: list[Genre] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)
    home_page: Optional[str] = Field(default=None, alias="homepage")
    in_production: bool = False
    episode_count: int = Field(default=0, alias="number_of_episodes")
    season_count: int = Field(default=0, alias="number_of_seasons")
    seasons: list[Season] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    networks: list[Network] = Field(default_factory=list)
    credits: Optional[MediaCredits] = None
    images: Optional[Images] = None
    videos: Optional[Videos] = None
    keywords: Optional[Keywords] = None
    translations: Optional[Translations] = None
    external_ids: Optional[ExternalIds] = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    rating: Optional[float] = None
    status: Optional[str] = None


Movie.model_rebuild()
Collection.model_rebuild()
Company.model_rebuild()
