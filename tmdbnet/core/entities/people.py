"""
Modeles des personnes (acteurs, equipe technique) et de leurs credits.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from tmdbnet.core.entities.base import AnyResource, Resource, ServiceModel
from tmdbnet.core.entities.common import ExternalIds, Image


class PersonCredit(ServiceModel):
    """
    Participation d'une personne a un film ou une serie.

    title/original_title sont remplis pour les films, name pour les series
    (credits combines).
    """

    id: int = 0
    credit_id: Optional[str] = None
    media_type: Optional[str] = None
    title: Optional[str] = None
    original_title: Optional[str] = None
    name: Optional[str] = None
    poster: Optional[str] = Field(default=None, alias="poster_path")
    release_date: Optional[date] = None
    adult: bool = False


class PersonCast(PersonCredit):
    character: Optional[str] = None


class PersonCrew(PersonCredit):
    department: Optional[str] = None
    job: Optional[str] = None


class PersonCredits(ServiceModel):
    cast: list[PersonCast] = Field(default_factory=list)
    crew: list[PersonCrew] = Field(default_factory=list)


class PersonImages(ServiceModel):
    results: list[Image] = Field(default_factory=list, alias="profiles")


class Person(Resource):
    """
    Personne (acteur, realisateur...).

    known_for contient des ressources polymorphes (films ou series)
    dans les resultats de recherche.
    """

    name: Optional[str] = None
    adult: bool = False
    known_as: list[str] = Field(default_factory=list, alias="also_known_as")
    known_for: list[AnyResource] = Field(default_factory=list)
    known_for_department: Optional[str] = None
    biography: Optional[str] = None
    birth_day: Optional[str] = Field(default=None, alias="birthday")
    death_day: Optional[str] = Field(default=None, alias="deathday")
    home_page: Optional[str] = Field(default=None, alias="homepage")
    birth_place: Optional[str] = Field(default=None, alias="place_of_birth")
    poster: Optional[str] = Field(default=None, alias="profile_path")
    credits: Optional[PersonCredits] = None
    images: Optional[PersonImages] = None
    external_ids: Optional[ExternalIds] = None
    popularity: float = 0.0
