"""
Couche domaine (core).

Contient les modeles de reponse, les ports (interfaces abstraites) et les
objets valeur. Cette couche ne depend pas de la couche HTTP (adapters).

Sous-packages :
- entities/ : Modeles types des reponses JSON (Movie, Show, Person...)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (Command, DataInfoType)
"""
