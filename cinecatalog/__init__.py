"""
CineCatalog - API de gestion d'un catalogue de films.

Ce package expose une API REST pour administrer les films, acteurs, genres
et cinemas, ainsi que leurs relations (distribution ordonnee, genres, salles).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, regles de distribution)
- services/ : Couche application (assemblage, projections, cas d'utilisation)
- adapters/ : Stockage des fichiers et cache des reponses
- infrastructure/ : Persistance SQLModel
- web/ : Application FastAPI
"""

__version__ = "0.1.0"
