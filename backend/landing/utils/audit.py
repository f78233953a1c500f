from flask import g, has_request_context
from landing.extensions import db
from landing.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    if not has_request_context():
        return  # Service calls outside a request carry no actor
    if not getattr(g, "current_tenant", None) or not getattr(g, "current_actor_id", None):
        return  # Skip logging if actor or tenant context is missing
    log = AuditLog()

    log.actor_id = g.current_actor_id
    log.tenant_id = g.current_tenant.id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
