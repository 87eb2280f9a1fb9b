import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from inventory_api.core.db import get_session
from inventory_api.core.exceptions import NotFoundError, ValidationFailed
from inventory_api.dependencies.auth import require_read, require_write
from inventory_api.services.resource import ParentListing, ResourceDefinition, ResourceService

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Внутренняя ошибка сервера"


def _raise_http(error: Exception, action: str) -> None:
    if isinstance(error, NotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    if isinstance(error, ValidationFailed):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)
    logger.error(f"Error {action}: {error}")
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


def build_resource_router(definition: ResourceDefinition) -> APIRouter:
    """CRUD, relation probe and parent listings for one entity."""
    router = APIRouter(prefix=f"/api/{definition.route}", tags=[definition.route])
    route = definition.route
    schema = definition.schema
    read_schema = definition.output_schema

    def to_read(item):
        return read_schema.model_validate(item)

    def add_parent_listing(listing: ParentListing):
        @router.get(f"/{listing.path}/{{parent_id}}", response_model=List[read_schema],
                    name=f"{route}_{listing.path}")
        async def list_by_parent(
            parent_id: int,
            db: Session = Depends(get_session),
            current_user=Depends(require_read),
        ):
            try:
                items = ResourceService(db, definition).list_by_parent(listing, parent_id)
                return [to_read(item) for item in items]
            except Exception as e:
                _raise_http(e, f"listing {route} {listing.path} {parent_id}")

    for parent in definition.parents:
        add_parent_listing(parent)

    @router.get("", response_model=List[read_schema], name=f"{route}_list")
    async def list_items(
        request: Request,
        db: Session = Depends(get_session),
        current_user=Depends(require_read),
        search: Optional[str] = Query(None),
        sort_by: Optional[str] = Query(None, alias="sortBy"),
        sort_order: Optional[str] = Query("asc", alias="sortOrder"),
    ):
        try:
            filters = {param: request.query_params.get(param) for param in definition.filters}
            items = ResourceService(db, definition).list(
                search=search, sort_by=sort_by, sort_order=sort_order, filters=filters
            )
            return [to_read(item) for item in items]
        except Exception as e:
            _raise_http(e, f"listing {route}")

    @router.get("/{item_id}", response_model=read_schema, name=f"{route}_get")
    async def get_item(
        item_id: int,
        db: Session = Depends(get_session),
        current_user=Depends(require_read),
    ):
        try:
            return to_read(ResourceService(db, definition).get(item_id))
        except Exception as e:
            _raise_http(e, f"loading {route} {item_id}")

    @router.get("/{item_id}/check-relations", response_model=bool, name=f"{route}_check_relations")
    async def check_relations(
        item_id: int,
        db: Session = Depends(get_session),
        current_user=Depends(require_read),
    ):
        try:
            return ResourceService(db, definition).has_relations(item_id)
        except Exception as e:
            _raise_http(e, f"checking relations of {route} {item_id}")

    @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED, name=f"{route}_create")
    async def create_item(
        payload: schema,
        request: Request,
        response: Response,
        db: Session = Depends(get_session),
        current_user=Depends(require_write),
    ):
        try:
            item = ResourceService(db, definition).create(payload)
        except Exception as e:
            _raise_http(e, f"creating {route}")

        response.headers["Location"] = str(request.url_for(f"{route}_get", item_id=item.id))
        return to_read(item)

    @router.put("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, name=f"{route}_update")
    async def update_item(
        item_id: int,
        payload: schema,
        db: Session = Depends(get_session),
        current_user=Depends(require_write),
    ):
        try:
            ResourceService(db, definition).update(item_id, payload)
        except Exception as e:
            _raise_http(e, f"updating {route} {item_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, name=f"{route}_delete")
    async def delete_item(
        item_id: int,
        db: Session = Depends(get_session),
        current_user=Depends(require_write),
    ):
        try:
            ResourceService(db, definition).delete(item_id)
        except Exception as e:
            _raise_http(e, f"deleting {route} {item_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
