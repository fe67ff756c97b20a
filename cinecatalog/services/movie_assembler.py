"""
Assemblage de l'agregat film a partir d'une requete de creation ou d'edition.

L'assembleur ne touche ni a la base ni au stockage des fichiers : il recoit
l'URL d'affiche deja enregistree (ou None) et produit l'agregat a persister.
Dans les deux cas, la distribution est reindexee (position = index).
"""

from typing import Optional

from cinecatalog.core.casting import reindex_cast, unique_cast, unique_ids
from cinecatalog.core.entities.catalog import CastMember, Movie, MovieDraft


class MovieAssembler:
    """
    Construit ou met a jour un agregat Movie depuis un MovieDraft.

    Example:
        assembler = MovieAssembler()
        movie = assembler.build(draft, poster_url)
        movie = assembler.overlay(draft, existing, poster_url=None)  # affiche conservee
    """

    @staticmethod
    def _cast_from(draft: MovieDraft) -> list[CastMember]:
        return [
            CastMember(actor_id=item.actor_id, character=item.character)
            for item in unique_cast(draft.cast)
        ]

    def build(self, draft: MovieDraft, poster_url: Optional[str] = None) -> Movie:
        """
        Cree un nouvel agregat depuis la requete.

        Args:
            draft: Requete de creation
            poster_url: URL de l'affiche enregistree, None si pas d'affiche

        Returns:
            Agregat sans ID, distribution reindexee
        """
        movie = Movie(
            title=draft.title,
            release_date=draft.release_date,
            trailer=draft.trailer,
            poster=poster_url,
            cast=self._cast_from(draft),
            genre_ids=unique_ids(draft.genre_ids),
            theater_ids=unique_ids(draft.theater_ids),
        )
        movie.cast = reindex_cast(movie.cast)
        return movie

    def overlay(
        self, draft: MovieDraft, existing: Movie, poster_url: Optional[str] = None
    ) -> Movie:
        """
        Applique une requete d'edition sur un agregat existant.

        Les champs simples sont ecrases, les collections remplacees en
        entier par la selection de la requete. L'affiche n'est remplacee
        que si une nouvelle URL est fournie.

        Args:
            draft: Requete d'edition
            existing: Agregat tel que persiste
            poster_url: URL de la nouvelle affiche, None pour garder l'actuelle

        Returns:
            L'agregat mis a jour (meme ID), distribution reindexee
        """
        existing.title = draft.title
        existing.release_date = draft.release_date
        existing.trailer = draft.trailer
        if poster_url is not None:
            existing.poster = poster_url
        existing.cast = self._cast_from(draft)
        existing.genre_ids = unique_ids(draft.genre_ids)
        existing.theater_ids = unique_ids(draft.theater_ids)
        existing.cast = reindex_cast(existing.cast)
        return existing
