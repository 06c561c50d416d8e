"""
Modeles lies au compte utilisateur, a l'authentification et aux
reponses de statut des operations d'ecriture.
"""

from typing import Optional

from pydantic import AliasChoices, Field

from tmdbnet.core.entities.base import AnyResource, ServiceModel

# Codes de statut du service signalant une ecriture reussie
STATUS_SUCCESS = 1
STATUS_UPDATED = 12
STATUS_DELETED = 13
SUCCESS_CODES = frozenset({STATUS_SUCCESS, STATUS_UPDATED, STATUS_DELETED})


class Status(ServiceModel):
    """Reponse de statut renvoyee par les operations d'ecriture."""

    code: int = Field(default=0, alias="status_code")
    message: Optional[str] = Field(default=None, alias="status_message")

    @property
    def succeeded(self) -> bool:
        """Vrai si le code de statut signale une creation, mise a jour ou suppression."""
        return self.code in SUCCESS_CODES


class ListCreated(Status):
    list_id: Optional[str] = None


class ItemStatus(ServiceModel):
    id: Optional[str] = None
    present: bool = Field(default=False, alias="item_present")


class AuthenticationResult(ServiceModel):
    """Reponse des trois etapes d'authentification (token, session, invite)."""

    success: bool = False
    token: Optional[str] = Field(default=None, alias="request_token")
    session: Optional[str] = Field(default=None, alias="session_id")
    guest: Optional[str] = Field(default=None, alias="guest_session_id")
    expires_at: Optional[str] = None


class Account(ServiceModel):
    id: int = 0
    name: Optional[str] = None
    user_name: Optional[str] = Field(default=None, alias="username")
    include_adult: bool = False
    language_code: Optional[str] = Field(default=None, alias="iso_639_1")
    country_code: Optional[str] = Field(default=None, alias="iso_3166_1")


class MediaList(ServiceModel):
    """Liste utilisateur (favoris partages, selections...)."""

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    created_by: Optional[str] = None
    favorite_count: int = 0
    item_count: int = 0
    language_code: Optional[str] = Field(default=None, alias="iso_639_1")
    list_type: Optional[str] = None
    poster: Optional[str] = Field(default=None, alias="poster_path")
    items: list[AnyResource] = Field(default_factory=list)


class Certification(ServiceModel):
    name: Optional[str] = Field(default=None, alias="certification")
    meaning: Optional[str] = None
    order: int = 0


class Certifications(ServiceModel):
    # Indexees par code pays ISO 3166-1
    results: dict[str, list[Certification]] = Field(
        default_factory=dict, alias="certifications"
    )


class Job(ServiceModel):
    department: Optional[str] = None
    jobs: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("job_list", "jobs"),
    )


class Jobs(ServiceModel):
    results: list[Job] = Field(default_factory=list, alias="jobs")


class ImagesConfiguration(ServiceModel):
    base_url: Optional[str] = None
    secure_base_url: Optional[str] = None
    backdrop_sizes: list[str] = Field(default_factory=list)
    logo_sizes: list[str] = Field(default_factory=list)
    poster_sizes: list[str] = Field(default_factory=list)
    profile_sizes: list[str] = Field(default_factory=list)
    still_sizes: list[str] = Field(default_factory=list)


class Configuration(ServiceModel):
    images: ImagesConfiguration = Field(default_factory=ImagesConfiguration)
    change_keys: list[str] = Field(default_factory=list)

