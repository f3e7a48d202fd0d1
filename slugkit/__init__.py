# slugkit/__init__.py
import logging
from typing import Any, Dict, Optional
from flask import Flask
from flask_cors import CORS
from .config import SlugSettings, load_config
from .hooks.record_hook import SlugRecordHook
from .repositories.memory_slug_repository import InMemorySlugRepository
from .repositories.slug_repository import BigQuerySlugRepository
from .services.slug_service import SlugService
from .services.unique_slug_service import UniqueSlugService


def build_repository(cfg: Dict[str, Any]):
    if cfg["SLUG_BACKEND"] == "memory":
        return InMemorySlugRepository()
    return BigQuerySlugRepository(key_column=cfg["SLUG_KEY_COLUMN"], dataset=cfg["BQ_DATASET"])


def create_app(config: Optional[Dict[str, Any]] = None, repo=None):
    cfg = load_config()
    cfg.update(config or {})

    logging.basicConfig(
        level=cfg["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config.update(cfg)

    CORS(
        app,
        resources={r"/*": {
            "origins": cfg["CORS_ORIGINS"],
            "allow_headers": ["Content-Type", "Authorization"],
            "methods": ["GET", "POST", "OPTIONS"],
        }},
    )

    settings = SlugSettings.from_config(cfg)
    slugs = SlugService(settings)
    unique = UniqueSlugService(repo if repo is not None else build_repository(cfg), slugs, settings)
    app.extensions["slugkit"] = {
        "settings": settings,
        "slugs": slugs,
        "unique": unique,
        "hook": SlugRecordHook(unique, settings),
    }

    from .controllers.slug_controller import slug_bp

    app.register_blueprint(slug_bp)

    return app
