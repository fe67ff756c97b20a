"""
Erreurs du domaine CineCatalog.

Trois familles, toutes derivees de CatalogError :
- NotFoundError : l'identifiant ne correspond a aucune entite
- ValidationError : champ obligatoire absent ou reference inconnue
- AssetStoreError : l'enregistrement d'un fichier a echoue

Aucune de ces erreurs n'est levee apres le commit : l'etat persiste
n'est jamais modifie partiellement.
"""

from typing import Iterable, Optional


class CatalogError(Exception):
    """Erreur de base du catalogue."""


class NotFoundError(CatalogError):
    """
    Exception levee quand une entite est introuvable.

    Attributes:
        entity: Nom de l'entite recherchee (ex: "movie")
        entity_id: Identifiant demande
    """

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ValidationError(CatalogError):
    """
    Exception levee quand une requete d'ecriture est invalide.

    Attributes:
        errors: Messages d'erreur regroupes par champ
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        summary = "; ".join(
            f"{field}: {message}"
            for field, messages in errors.items()
            for message in messages
        )
        super().__init__(summary)

    @classmethod
    def unknown_references(cls, field: str, missing_ids: Iterable[int]) -> "ValidationError":
        """Construit l'erreur pour des identifiants references inexistants."""
        ids = ", ".join(str(i) for i in sorted(missing_ids))
        return cls({field: [f"unknown ids: {ids}"]})


class AssetStoreError(CatalogError):
    """
    Exception levee quand le stockage d'un fichier echoue.

    Attributes:
        bucket: Conteneur cible
        reference: URL concernee, si connue
    """

    def __init__(self, bucket: str, reason: str, reference: Optional[str] = None) -> None:
        self.bucket = bucket
        self.reference = reference
        super().__init__(f"asset store failure in '{bucket}': {reason}")
