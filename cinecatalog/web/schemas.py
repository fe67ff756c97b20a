"""
Schemas d'entree de l'API.

Les formulaires film et acteur arrivent en multipart/form-data (fichier
joint) ; les listes du formulaire film sont des tableaux JSON encodes
dans un champ texte, comme les envoie le front d'administration.
"""

from datetime import date
from typing import Annotated, Any, Optional

from fastapi import File, Form, UploadFile
from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.entities.catalog import Actor, AssetUpload, CastSelection, Genre, MovieDraft, Theater
from ..core.exceptions import ValidationError


class CastSelectionIn(BaseModel):
    """Acteur choisi dans le formulaire film."""

    id: int
    character: str = Field(default="", max_length=100)


class GenreIn(BaseModel):
    """Corps de creation/modification d'un genre."""

    name: str

    def to_entity(self) -> Genre:
        return Genre(name=self.name)


class TheaterIn(BaseModel):
    """Corps de creation/modification d'un cinema."""

    name: str
    latitude: float
    longitude: float

    def to_entity(self) -> Theater:
        return Theater(name=self.name, latitude=self.latitude, longitude=self.longitude)


_ID_LIST = TypeAdapter(list[int])
_CAST_LIST = TypeAdapter(list[CastSelectionIn])


def _parse_json_field(field: str, raw: Optional[str], adapter: TypeAdapter) -> Any:
    """Decode un champ texte contenant un tableau JSON, vide si absent."""
    if raw is None or not raw.strip():
        return []
    try:
        return adapter.validate_json(raw)
    except PydanticValidationError as e:
        raise ValidationError({field: [err["msg"] for err in e.errors()]}) from e


async def _read_upload(upload: Optional[UploadFile]) -> Optional[AssetUpload]:
    """Lit un fichier joint ; un champ fichier vide vaut absence de fichier."""
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    if not content:
        return None
    return AssetUpload(filename=upload.filename, content=content, content_type=upload.content_type)


async def movie_draft_form(
    title: Annotated[str, Form()],
    release_date: Annotated[date, Form()],
    trailer: Annotated[Optional[str], Form()] = None,
    genre_ids: Annotated[Optional[str], Form()] = None,
    theater_ids: Annotated[Optional[str], Form()] = None,
    actors: Annotated[Optional[str], Form()] = None,
    poster: Annotated[Optional[UploadFile], File()] = None,
) -> MovieDraft:
    """Dependance FastAPI : formulaire film -> MovieDraft."""
    cast = _parse_json_field("actors", actors, _CAST_LIST)
    return MovieDraft(
        title=title,
        release_date=release_date,
        trailer=trailer or None,
        poster=await _read_upload(poster),
        cast=[CastSelection(actor_id=item.id, character=item.character) for item in cast],
        genre_ids=_parse_json_field("genre_ids", genre_ids, _ID_LIST),
        theater_ids=_parse_json_field("theater_ids", theater_ids, _ID_LIST),
    )


class ActorForm:
    """Formulaire acteur decode : entite et photo jointe eventuelle."""

    def __init__(self, actor: Actor, photo: Optional[AssetUpload]) -> None:
        self.actor = actor
        self.photo = photo


async def actor_form(
    name: Annotated[str, Form()],
    birth_date: Annotated[date, Form()],
    photo: Annotated[Optional[UploadFile], File()] = None,
) -> ActorForm:
    """Dependance FastAPI : formulaire acteur -> ActorForm."""
    return ActorForm(
        actor=Actor(name=name, birth_date=birth_date),
        photo=await _read_upload(photo),
    )
