import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from inventory_api.core.db import get_session
from inventory_api.services.audit import AuditService
from inventory_api.dependencies.auth import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/audit", tags=["audit"])


@router.get("/stats")
async def audit_stats(
    db: Session = Depends(get_session),
    current_user=Depends(require_admin),
    days: int = Query(30, ge=1),
):
    stats = AuditService(db).get_log_statistics(days)
    if stats is None:
        raise HTTPException(status_code=500, detail="Не удалось получить статистику журнала")
    return stats


@router.get("/errors")
async def audit_errors(
    db: Session = Depends(get_session),
    current_user=Depends(require_admin),
    limit: int = Query(50, ge=1, le=500),
):
    recent_errors = AuditService(db).get_recent_errors(limit)
    if recent_errors is None:
        raise HTTPException(status_code=500, detail="Не удалось получить список ошибок")
    return recent_errors


@router.get("/history/{entity_name}/{entity_id}")
async def entity_history(
    entity_name: str,
    entity_id: str,
    db: Session = Depends(get_session),
    current_user=Depends(require_admin),
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, le=500),
):
    history = AuditService(db).get_entity_history(entity_name, entity_id, page=page, limit=limit)
    if history is None:
        raise HTTPException(status_code=500, detail="Не удалось получить историю изменений")
    return history
