"""
Interfaces ports pour les clients API.

Interfaces abstraites definissant les contrats entre les facades par
ressource et le coeur d'execution des requetes, ainsi que le contrat
du telechargement d'images.
"""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Optional, TypeVar

from tmdbnet.core.value_objects import Command

T = TypeVar("T")


class IRequestExecutor(ABC):
    """
    Coeur d'execution des requetes.

    Execute une Command avec gestion du rate limiting et convertit la
    reponse en valeur typee, ou leve ServiceRequestError.
    """

    @abstractmethod
    async def get(self, command: Command, result_type: type[T]) -> T:
        """
        Execute une requete GET et deserialise la reponse.

        Args :
            command : Commande a executer
            result_type : Type attendu de la reponse

        Retourne :
            Valeur de type result_type
        """
        ...

    @abstractmethod
    async def send(
        self,
        method: str,
        command: Command,
        result_type: type[T],
        body: Optional[dict[str, Any]] = None,
    ) -> T:
        """
        Execute une requete avec methode et corps JSON optionnel.

        Args :
            method : Methode HTTP (POST, DELETE...)
            command : Commande a executer
            result_type : Type attendu de la reponse
            body : Corps JSON optionnel
        """
        ...


class IImageStorage(ABC):
    """Contrat du telechargement d'images depuis le CDN du service."""

    @abstractmethod
    async def download(
        self,
        file_path: str,
        sink: BinaryIO,
        size: str = "original",
    ) -> int:
        """
        Copie une image dans le flux fourni.

        Args :
            file_path : Chemin de l'image (ex: "/kqjL17yufvn9OVLyXYpvtyrFfak.jpg")
            sink : Flux binaire de destination
            size : Taille demandee (ex: "w500", "original")

        Retourne :
            Nombre d'octets ecrits
        """
        ...
