"""
Regles pures de la distribution d'un film.

La position d'un membre de la distribution est toujours egale a son index
dans la liste ordonnee du film. reindex_cast est le seul endroit qui ecrit
cette position ; il est appele a chaque ecriture d'un film, meme si la
distribution n'a pas change.
"""

from typing import Iterable, Protocol, Sequence, TypeVar

from cinecatalog.core.entities.catalog import CastSelection


class _Positioned(Protocol):
    position: int


PositionedT = TypeVar("PositionedT", bound=_Positioned)


def reindex_cast(cast: Sequence[PositionedT]) -> list[PositionedT]:
    """
    Assigne position = index a chaque membre, dans l'ordre recu.

    Args:
        cast: Distribution dans l'ordre soumis par le client

    Returns:
        La meme distribution, positions 0, 1, 2... sans trou ni doublon
    """
    members = list(cast)
    for index, member in enumerate(members):
        member.position = index
    return members


def unique_cast(selection: Iterable[CastSelection]) -> list[CastSelection]:
    """Supprime les acteurs en double en gardant leur premiere occurrence."""
    seen: set[int] = set()
    result = []
    for item in selection:
        if item.actor_id in seen:
            continue
        seen.add(item.actor_id)
        result.append(item)
    return result


def unique_ids(ids: Iterable[int]) -> list[int]:
    """Supprime les identifiants en double en conservant l'ordre."""
    return list(dict.fromkeys(ids))
