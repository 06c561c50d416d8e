"""
tmdbnet - Client asynchrone de l'API TMDb (The Movie Database, v3).

Ce package fournit des operations typees (recherche, decouverte, details,
credits, images, actions de compte) correspondant une a une aux endpoints
du service, avec un coeur d'execution resilient face a la limitation.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (modeles de reponse, ports, objets valeur)
- adapters/ : Couche infrastructure (client HTTP, facades, CLI)
"""

__version__ = "0.1.0"
