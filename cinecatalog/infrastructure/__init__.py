"""
Couche infrastructure de CineCatalog.

Ce module contient les implementations concretes des interfaces de persistance
definies dans la couche domaine (ports) :

- persistence/ : Stockage SQLModel (modeles, repositories, projections de lecture)

Architecture hexagonale : changer de base (ex: PostgreSQL au lieu de SQLite)
ne demande que de changer CINECATALOG_DATABASE_URL.
"""
