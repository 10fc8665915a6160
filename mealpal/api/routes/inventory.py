from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from mealpal.api.http_errors import to_http
from mealpal.logic.inventory.service import InventoryService, validate_item, validate_quantity
from mealpal.utilities.config import DEFAULT_PAGE_LIMIT
from mealpal.utilities.errors import InvalidInputError, MealPalError, NotFoundError
from mealpal.utilities.validators import BulkInventoryInput, InventoryItemInput, InventoryUpdateInput

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("")
def list_inventory(
    name: Optional[str] = Query(default=None, description="Substring of the item name"),
    min_quantity: Optional[int] = Query(default=None, alias="minQuantity"),
    max_quantity: Optional[int] = Query(default=None, alias="maxQuantity"),
    sort_by: Optional[str] = Query(default=None, alias="sortBy", pattern="^(name|quantity)$"),
    sort_order: str = Query(default="asc", alias="sortOrder", pattern="^(asc|desc)$"),
    page: int = Query(default=1),
    limit: int = Query(default=DEFAULT_PAGE_LIMIT),
):
    try:
        return InventoryService().list_items(name, min_quantity, max_quantity, sort_by, sort_order, page, limit)
    except MealPalError as e:
        raise to_http(e)


@router.get("/{item}")
def get_item(item: str):
    try:
        return InventoryService().get_item(item)
    except NotFoundError as e:
        return JSONResponse(status_code=404, content={"error": str(e), "item": item, "quantity": 0})
    except MealPalError as e:
        raise to_http(e)


@router.post("/add")
def add_item(body: InventoryItemInput):
    try:
        return InventoryService().add_item(body.item, body.quantity, body.unit)
    except MealPalError as e:
        raise to_http(e)


@router.post("/remove")
def remove_item(body: InventoryItemInput):
    try:
        return InventoryService().remove_item(body.item, body.quantity)
    except MealPalError as e:
        raise to_http(e)


@router.post("")
def bulk_add(body: BulkInventoryInput):
    """Add several items; nothing is written unless every entry is valid."""
    errors = []
    for entry in body.items:
        try:
            validate_item(entry.item)
            validate_quantity(entry.quantity)
        except InvalidInputError as e:
            errors.append({"item": entry.item, "error": str(e)})
    if errors:
        raise HTTPException(status_code=400, detail=errors)
    return {"results": InventoryService().bulk_add([e.model_dump() for e in body.items])}


@router.put("")
def update_item(body: InventoryUpdateInput):
    service = InventoryService()
    try:
        if body.operation == "add":
            return service.add_item(body.item, body.quantity, body.unit)
        return service.remove_item(body.item, body.quantity)
    except MealPalError as e:
        raise to_http(e)
