"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports client API :
- IRequestExecutor : execution resiliente d'une Command et deserialisation
- IImageStorage : telechargement d'images vers un flux
"""

from tmdbnet.core.ports.api_clients import IImageStorage, IRequestExecutor

__all__ = [
    "IImageStorage",
    "IRequestExecutor",
]
