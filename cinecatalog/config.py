"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINECATALOG_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de cinecatalog/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINECATALOG_.
    Exemple : CINECATALOG_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINECATALOG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///cinecatalog.db")

    # Stockage des affiches et photos (servi sous media_base_url)
    media_dir: Path = Field(default=Path("media"))
    media_base_url: str = Field(default="/media")

    # Cache des réponses (invalidé à chaque écriture)
    cache_dir: Path = Field(default=Path(".cache/responses"))
    cache_ttl_seconds: int = Field(default=3600, ge=1)

    # Page d'accueil : nombre de films par liste
    landing_top: int = Field(default=6, ge=1)

    # Origines autorisées pour le front d'administration
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:4200"])

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinecatalog.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("media_dir", "cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("media_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise l'URL de base sans slash final."""
        return v.rstrip("/") or "/"
