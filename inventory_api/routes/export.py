import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from inventory_api.core.db import get_session
from inventory_api.dependencies.auth import require_read
from inventory_api.resources import equipment
from inventory_api.services.export import EquipmentExportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/equipment", tags=["equipment"])


@router.get("/export")
async def export_equipment_excel(
    db: Session = Depends(get_session),
    current_user=Depends(require_read),
    search: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query("asc", alias="sortOrder"),
):
    """Export the filtered equipment list to Excel format"""
    try:
        export_service = EquipmentExportService(db, equipment)

        output = export_service.export_equipment_to_excel(search=search, sort_by=sort_by, sort_order=sort_order)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"equipment_{timestamp}.xlsx"

        return Response(
            content=output.getvalue(),
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    except Exception as e:
        logger.error(f"Error exporting equipment to Excel: {e}")
        raise HTTPException(status_code=500, detail="Не удалось выгрузить данные")
