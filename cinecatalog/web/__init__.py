"""
Interface web (FastAPI) de CineCatalog.

L'application est construite par create_app() ; uvicorn l'instancie en
mode factory (voir la commande `serve`).
"""
