"""Accessors for the per-app landing services registered by ``create_app``."""
from flask import current_app

from landing.application.sections import SqlSectionStore
from landing.composition import PageComposer, SqlTranslationSource

CATALOG_KEY = "landing.catalog"
REGISTRY_KEY = "landing.renderers"


def current_catalog():
    return current_app.extensions[CATALOG_KEY]


def current_registry():
    return current_app.extensions[REGISTRY_KEY]


def current_store() -> SqlSectionStore:
    return SqlSectionStore(current_catalog())


def current_composer() -> PageComposer:
    return PageComposer(
        catalog=current_catalog(),
        store=current_store(),
        registry=current_registry(),
        translations=SqlTranslationSource(),
        fallback_language=current_app.config.get("LANDING_FALLBACK_LANGUAGE", "es"),
        media_base_url=current_app.config.get("LANDING_MEDIA_BASE_URL", "/media"),
    )
