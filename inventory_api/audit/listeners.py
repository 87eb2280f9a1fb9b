from sqlalchemy import event
from sqlalchemy.orm import Session
from sqlalchemy.inspection import inspect
from typing import Dict, Any

from inventory_api.models.audit_log import AuditLog
from inventory_api.audit.context import audit_context

MASKED_FIELDS = {"password", "token"}
MASK = "***"


def _audit_value(key: str, value: Any) -> Any:
    if value is None:
        return None
    if key in MASKED_FIELDS:
        return MASK
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    return str(value)


def _is_audited(instance) -> bool:
    return hasattr(instance, "__tablename__") and not isinstance(instance, AuditLog)


def get_model_changes(model_instance) -> Dict[str, Any]:
    state = inspect(model_instance)
    changes = {}
    for attr in state.attrs:
        history = attr.history
        if not history.has_changes():
            continue

        old_value = history.deleted[0] if history.deleted else None
        new_value = history.added[0] if history.added else None

        if old_value != new_value:
            changes[attr.key] = {
                "old": _audit_value(attr.key, old_value),
                "new": _audit_value(attr.key, new_value),
            }
    return changes


def _snapshot(instance) -> Dict[str, Any]:
    state = inspect(instance)
    return {attr.key: _audit_value(attr.key, getattr(instance, attr.key, None)) for attr in state.attrs}


def before_flush_listener(session: Session, flush_context, instances):
    context = audit_context.get() or {}

    session.info.setdefault("pending_audit_logs", [])

    # Log Updated Objects
    for instance in session.dirty:
        if not _is_audited(instance):
            continue
        changes = get_model_changes(instance)
        if not changes:
            continue
        pk_val = inspect(instance).identity[0] if inspect(instance).identity else None
        log = AuditLog(
            action="UPDATE",
            entity_name=instance.__class__.__name__,
            entity_id=str(pk_val) if pk_val else None,
            changes=changes,
            **context
        )
        session.add(log)

    # Log Deleted Objects
    for instance in session.deleted:
        if not _is_audited(instance):
            continue
        state = inspect(instance)
        pk_val = state.identity[0] if state.identity else None
        log = AuditLog(
            action="DELETE",
            entity_name=instance.__class__.__name__,
            entity_id=str(pk_val) if pk_val else None,
            changes={"old_values": _snapshot(instance)},
            **context
        )
        session.add(log)

    for instance in session.new:
        if not _is_audited(instance):
            continue

        session.info["pending_audit_logs"].append(
            {"instance": instance, "new_values": _snapshot(instance), "context": context}
        )


def after_flush_postexec_listener(session: Session, flush_context):
    pending_logs = session.info.get("pending_audit_logs", [])
    if not pending_logs:
        return

    # the primary keys exist only after the INSERT, so CREATE rows are added here
    session.info["pending_audit_logs"] = []
    for log_info in pending_logs:
        instance = log_info["instance"]

        pk_name = inspect(instance.__class__).primary_key[0].name
        pk_val = getattr(instance, pk_name, None)

        if pk_val:
            new_values = dict(log_info["new_values"], **{pk_name: str(pk_val)})
            log = AuditLog(
                action="CREATE",
                entity_name=instance.__class__.__name__,
                entity_id=str(pk_val),
                changes={"new_values": new_values},
                **log_info["context"]
            )
            session.add(log)


def initialize_audit_listeners():
    if not event.contains(Session, "before_flush", before_flush_listener):
        event.listen(Session, "before_flush", before_flush_listener)
    if not event.contains(Session, "after_flush_postexec", after_flush_postexec_listener):
        event.listen(Session, "after_flush_postexec", after_flush_postexec_listener)
