from flask import current_app, g, request, jsonify

from landing.composition import SqlTranslationSource
from landing.normalizers.landing import normalize_landing
from landing.runtime import current_composer
from landing.utils.decorators import feature_enabled
from . import v1_bp


def _page_data(tenant):
    """
    Tenant-owned context for the specialized renderers.

    Menus, gallery images and opening hours live outside the landing store;
    an embedding app supplies them through ``PageComposer.compose(data=...)``.
    """
    if tenant.has_feature("multilingual"):
        languages = SqlTranslationSource().languages(tenant)
    else:
        languages = [tenant.default_language]
    return {"languages": languages}


@v1_bp.route("/landing", methods=["GET"])
@feature_enabled("landing")
def get_landing():
    """Public landing page: the composed, localized section list."""
    tenant = g.current_tenant
    language = request.args.get("lang") or tenant.default_language

    # Single-language tenants always render in their default language
    if not tenant.has_feature("multilingual"):
        language = tenant.default_language

    data = _page_data(tenant)
    composed = current_composer().compose(tenant, language=language, data=data)

    current_app.logger.info(
        "Composed %d sections for %s (lang=%s)", len(composed), tenant.slug, language
    )
    return jsonify(normalize_landing(tenant, composed, language, data["languages"]))
