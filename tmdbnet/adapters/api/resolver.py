"""
Resolution des ressources polymorphes d'apres le champ media_type.

Les recherches multi-types renvoient des elements heterogenes que seul
le champ media_type distingue. Le resolveur choisit la forme concrete
dans une table de correspondance, avec repli sur la forme de base.
"""

from typing import Any, Mapping, Optional

from loguru import logger

from tmdbnet.core.entities import Movie, Person, Resource, Show

DISCRIMINATOR = "media_type"

DEFAULT_SHAPES: Mapping[str, type[Resource]] = {
    "movie": Movie,
    "person": Person,
    "tv": Show,
}


class ResourceResolver:
    """
    Choisit et construit la forme concrete d'une ressource.

    Une instance est passee explicitement au contexte de validation
    pydantic par l'interpreteur de reponses; aucune inscription globale.

    Attributes:
        shapes: Table media_type -> modele concret
    """

    def __init__(self, shapes: Optional[Mapping[str, type[Resource]]] = None) -> None:
        self.shapes = dict(DEFAULT_SHAPES if shapes is None else shapes)

    def shape_for(self, payload: Any) -> type[Resource]:
        """Retourne le modele correspondant au discriminant, Resource par defaut."""
        if not isinstance(payload, dict):
            return Resource
        tag = payload.get(DISCRIMINATOR)
        if not isinstance(tag, str):
            return Resource
        shape = self.shapes.get(tag)
        if shape is None:
            logger.debug("media_type inconnu: {tag}", tag=tag)
            return Resource
        return shape

    def resolve(self, payload: Any, context: Optional[dict[str, Any]] = None) -> Resource:
        """
        Construit la ressource concrete pour un element JSON.

        Args:
            payload: Element JSON (objet attendu)
            context: Contexte de validation a propager aux champs imbriques

        Returns:
            Instance de la forme choisie, jamais None
        """
        shape = self.shape_for(payload)
        if context is None:
            context = {"resolver": self}
        return shape.model_validate(payload, context=context)
