"""
Modeles partages entre films, series et personnes.
"""

from typing import Optional

from pydantic import Field

from tmdbnet.core.entities.base import ServiceModel


class Image(ServiceModel):
    """Fichier image (poster, backdrop, profil...) reference sur le CDN."""

    file_path: Optional[str] = None
    width: int = 0
    height: int = 0
    language_code: Optional[str] = Field(default=None, alias="iso_639_1")
    aspect_ratio: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0


class Images(ServiceModel):
    backdrops: list[Image] = Field(default_factory=list)
    posters: list[Image] = Field(default_factory=list)
    logos: list[Image] = Field(default_factory=list)
    stills: list[Image] = Field(default_factory=list)


class ExternalIds(ServiceModel):
    """Identifiants d'un objet dans les bases externes."""

    id: int = 0
    imdb: Optional[str] = Field(default=None, alias="imdb_id")
    freebase: Optional[str] = Field(default=None, alias="freebase_id")
    freebase_mid: Optional[str] = None
    tvdb: Optional[int] = Field(default=None, alias="tvdb_id")
    tvrage: Optional[int] = Field(default=None, alias="tvrage_id")
