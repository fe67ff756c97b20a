"""Stockage des fichiers (affiches, photos)."""
