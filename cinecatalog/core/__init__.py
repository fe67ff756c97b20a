"""
Couche domaine (core).

Contient les entites metier, les ports (interfaces abstraites), les erreurs
du domaine et les regles pures de la distribution.
Cette couche n'a AUCUNE dependance vers l'infrastructure (BDD, web, disque).

Sous-packages :
- entities/ : Entites metier (Movie, Actor, Genre, Theater) et vues de lecture
- ports/ : Interfaces abstraites pour les repositories et le stockage
"""
