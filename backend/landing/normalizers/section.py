def normalize_section(section, entry=None, admin=False):
    data = {
        "id": section.id,
        "section_key": section.section_key,
        "variant": section.variant,
        "order_index": section.order_index,
        "is_active": bool(section.is_active),
        "config_data": section.config_data or {},
    }

    if entry is not None:
        data["section_name"] = entry.name
        data["description"] = entry.description
        data["category"] = entry.category
        data["icon_name"] = entry.icon_name
        data["available_variants"] = [v.to_dict() for v in entry.available_variants]
        data["customizable_props"] = [p.to_dict() for p in entry.customizable_props]

    if admin:
        data["created_at"] = section.created_at.isoformat() if getattr(section, "created_at", None) else None
        data["updated_at"] = section.updated_at.isoformat() if getattr(section, "updated_at", None) else None

    return data
