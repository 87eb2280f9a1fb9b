import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from inventory_api.core.db import get_session
from inventory_api.dependencies.auth import require_read
from inventory_api.models.schemas import DropdownItem
from inventory_api.services.dropdown import DROPDOWNS, DropdownService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dropdown", tags=["dropdown"])


def _add_dropdown(path: str, loader, failure_message: str) -> None:
    @router.get(f"/{path}", response_model=List[DropdownItem], name=f"dropdown_{path}")
    async def dropdown(db: Session = Depends(get_session), current_user=Depends(require_read)):
        try:
            return loader(DropdownService(db))
        except Exception as e:
            logger.error(f"Error loading dropdown {path}: {e}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_message)


for _path, (_loader, _message) in DROPDOWNS.items():
    _add_dropdown(_path, _loader, _message)
