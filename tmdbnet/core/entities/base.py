"""
Modeles de base des reponses JSON du service.

Tous les modeles heritent de ServiceModel qui applique deux regles de
tolerance:
- un champ dont la conversion echoue prend sa valeur par defaut au lieu
  de faire echouer tout le document (le service ajoute des champs
  optionnels sans negociation de version)
- une charge qui n'est pas un objet JSON donne un modele entierement
  rempli de valeurs par defaut

Les noms JSON (snake_case) sont associes aux membres via des alias
explicites. Les membres restent accessibles par leur nom Python.
"""

from typing import Annotated, Any, Generic, Optional, TypeVar

from loguru import logger
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticUseDefault

T = TypeVar("T")


class ServiceModel(BaseModel):
    """Modele de base tolerant aux champs mal formes."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _require_mapping(cls, data: Any) -> Any:
        if isinstance(data, (dict, BaseModel)):
            return data
        logger.debug(
            "Charge inattendue pour {model}: {kind}",
            model=cls.__name__,
            kind=type(data).__name__,
        )
        return {}

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_error(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            return handler(value)
        except ValidationError as error:
            logger.debug(
                "Champ {model}.{field} ignore: {reason}",
                model=cls.__name__,
                field=info.field_name,
                reason=error.errors()[0]["msg"],
            )
            raise PydanticUseDefault() from error


class PagedResult(ServiceModel, Generic[T]):
    """
    Page de resultats telle que renvoyee par le service.

    Les metadonnees de pagination sont exposees telles quelles,
    sans strategie de parcours.

    Attributs:
        results: Elements de la page
        page_index: Numero de la page (1-indexe)
        page_count: Nombre total de pages
        total_count: Nombre total de resultats
    """

    results: list[T] = Field(default_factory=list)
    page_index: int = Field(default=0, alias="page")
    page_count: int = Field(default=0, alias="total_pages")
    total_count: int = Field(default=0, alias="total_results")


class Resource(ServiceModel):
    """
    Ressource polymorphe (film, personne, serie...).

    Le champ media_type sert de discriminant lors de la deserialisation
    des recherches multi-types. Une valeur inconnue donne cette forme
    de base, sans champ specifique.
    """

    id: int = 0
    media_type: Optional[str] = None


def _resolve_resource(
    value: Any,
    handler: ValidatorFunctionWrapHandler,
    info: ValidationInfo,
) -> Any:
    """Delegue la construction au resolveur passe dans le contexte."""
    resolver = (info.context or {}).get("resolver")
    if resolver is None:
        return handler(value)
    return resolver.resolve(value, info.context)


# Champ dont la forme concrete est choisie d'apres media_type
AnyResource = Annotated[Resource, WrapValidator(_resolve_resource)]
