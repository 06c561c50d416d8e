"""
Modeles types des reponses du service.

Exports principaux :
- Resource / AnyResource : ressource polymorphe et son type de champ
- Movie, Show, Season, Episode, Person : formes concretes
- PagedResult et ses specialisations (Movies, Shows, People, Resources...)
- Status, AuthenticationResult, Account : reponses de compte et d'ecriture
"""

from tmdbnet.core.entities.account import (
    Account,
    AuthenticationResult,
    Certification,
    Certifications,
    Configuration,
    ImagesConfiguration,
    ItemStatus,
    Job,
    Jobs,
    ListCreated,
    MediaList,
    Status,
)
from tmdbnet.core.entities.base import AnyResource, PagedResult, Resource, ServiceModel
from tmdbnet.core.entities.common import ExternalIds, Image, Images
from tmdbnet.core.entities.media import (
    AlternativeTitle,
    AlternativeTitles,
    Collection,
    Company,
    Country,
    CountryRelease,
    Episode,
    Genre,
    Genres,
    Keyword,
    Keywords,
    Language,
    MediaCast,
    MediaCredit,
    MediaCredits,
    MediaCrew,
    Movie,
    Network,
    Releases,
    Review,
    Reviews,
    Season,
    Show,
    Translation,
    Translations,
    Video,
    Videos,
)
from tmdbnet.core.entities.people import (
    Person,
    PersonCast,
    PersonCredit,
    PersonCredits,
    PersonCrew,
    PersonImages,
)
from tmdbnet.core.entities.results import (
    ChangedItem,
    Changes,
    Collections,
    Companies,
    FindResult,
    MediaLists,
    Movies,
    People,
    Resources,
    Shows,
)

__all__ = [
    "Account",
    "AlternativeTitle",
    "AlternativeTitles",
    "AnyResource",
    "AuthenticationResult",
    "Certification",
    "Certifications",
    "ChangedItem",
    "Changes",
    "Collection",
    "Collections",
    "Companies",
    "Company",
    "Configuration",
    "Country",
    "CountryRelease",
    "Episode",
    "ExternalIds",
    "FindResult",
    "Genre",
    "Genres",
    "Image",
    "Images",
    "ImagesConfiguration",
    "ItemStatus",
    "Job",
    "Jobs",
    "Keyword",
    "Keywords",
    "Language",
    "ListCreated",
    "MediaCast",
    "MediaCredit",
    "MediaCredits",
    "MediaCrew",
    "MediaList",
    "MediaLists",
    "Movie",
    "Movies",
    "Network",
    "PagedResult",
    "People",
    "Person",
    "PersonCast",
    "PersonCredit",
    "PersonCredits",
    "PersonCrew",
    "PersonImages",
    "Releases",
    "Resource",
    "Resources",
    "Review",
    "Reviews",
    "Season",
    "ServiceModel",
    "Show",
    "Shows",
    "Status",
    "Translation",
    "Translations",
    "Video",
    "Videos",
]
