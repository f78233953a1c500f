# landing/api/v1/sections.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from werkzeug.http import http_date

from landing.application.sections import (
    create_section,
    delete_section,
    get_section,
    list_sections,
    reorder_sections,
    toggle_section,
    update_section,
)
from landing.domain.exceptions import UnregisteredSection
from landing.normalizers.section import normalize_section
from landing.runtime import current_catalog
from landing.schema import build_form, set_value
from landing.utils.decorators import tenant_required, roles_required, feature_enabled
from landing.utils.optimistic_lock import enforce_optimistic_lock
from . import v1_bp


def _section_response(section, status=200):
    entry = current_catalog().get(section.section_key)
    response = jsonify(normalize_section(section, entry=entry, admin=True))
    response.status_code = status
    if section.updated_at is not None:
        response.headers["Last-Modified"] = http_date(section.updated_at)
    return response


def _json_object():
    """The request body as a dict: {} when absent, None when it is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _entry_for(section):
    entry = current_catalog().get(section.section_key)
    if entry is None:
        raise UnregisteredSection(section.section_key)
    return entry


# ------------------------
# Library
# ------------------------

@v1_bp.route("/landing/library", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required("admin")
def get_library():
    return jsonify({"items": current_catalog().to_list()})


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/landing/sections", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing")
def list_landing_sections():
    tenant = g.current_tenant
    catalog = current_catalog()

    sections = list_sections(tenant_id=tenant.id)

    return jsonify({
        "items": [
            normalize_section(s, entry=catalog.get(s.section_key), admin=True)
            for s in sections
        ]
    })


@v1_bp.route("/landing/sections", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing")
def create_landing_section():
    tenant = g.current_tenant
    data = _json_object()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400

    section_key = data.get("section_key")
    if not section_key:
        return jsonify({"error": "section_key is required"}), 400

    config_data = data.get("config_data")
    if config_data is not None and not isinstance(config_data, dict):
        return jsonify({"error": "config_data must be an object"}), 400

    section = create_section(
        tenant_id=tenant.id,
        section_key=section_key,
        variant=data.get("variant"),
        config_data=config_data,
        catalog=current_catalog(),
    )

    return _section_response(section, status=201)


@v1_bp.route("/landing/sections/reorder", methods=["PUT"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing")
def reorder_landing_sections():
    tenant = g.current_tenant
    data = _json_object()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400

    ordered_ids = data.get("ids")
    if not isinstance(ordered_ids, list) or not all(isinstance(i, str) for i in ordered_ids):
        return jsonify({"error": "ids must be a list of section ids"}), 400

    sections = reorder_sections(tenant_id=tenant.id, ordered_ids=ordered_ids)

    return jsonify({
        "message": "Sections reordered",
        "items": [{"id": s.id, "order_index": s.order_index} for s in sections],
    }), 200


@v1_bp.route("/landing/sections/<section_id>", methods=["PUT"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing")
def update_landing_section(section_id):
    tenant = g.current_tenant
    section = get_section(tenant_id=tenant.id, section_id=section_id)

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(section)

    data = _json_object()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400
    if "config_data" in data and data["config_data"] is not None and not isinstance(data["config_data"], dict):
        return jsonify({"error": "config_data must be an object"}), 400

    section = update_section(
        tenant_id=tenant.id,
        section_id=section_id,
        data=data,
        catalog=current_catalog(),
        section=section,
    )

    return _section_response(section)


@v1_bp.route("/landing/sections/<section_id>", methods=["DELETE"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing")
def delete_landing_section(section_id):
    tenant = g.current_tenant
    delete_section(tenant_id=tenant.id, section_id=section_id)
    return jsonify({"message": "Section deleted"}), 200


@v1_bp.route("/landing/sections/<section_id>/toggle", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("landing")
def toggle_landing_section(section_id):
    tenant = g.current_tenant
    section = toggle_section(tenant_id=tenant.id, section_id=section_id)
    return _section_response(section)


# ------------------------
# Edit form
# ------------------------

@v1_bp.route("/landing/sections/<section_id>/form", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required("admin")
def get_section_form(section_id):
    tenant = g.current_tenant
    section = get_section(tenant_id=tenant.id, section_id=section_id)
    entry = _entry_for(section)

    form = build_form(entry, section.config_data, variant=section.variant)
    return jsonify(form.to_dict())


@v1_bp.route("/landing/sections/<section_id>/fields/<key>", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
def preview_field_value(section_id, key):
    """Validate one field edit and return the resulting config without saving."""
    tenant = g.current_tenant
    section = get_section(tenant_id=tenant.id, section_id=section_id)
    entry = _entry_for(section)

    data = _json_object()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400
    if "value" not in data:
        return jsonify({"error": "value is required"}), 400

    config_data = set_value(
        entry.customizable_props,
        section.config_data,
        key,
        data["value"],
        language=data.get("language"),
    )

    return jsonify({"config_data": config_data, "value": config_data.get(key), "persisted": False})
