"""Delivery Routes — filtered listing."""

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_delivery_handlers
from app.schemas.delivery import DeliveryOut
from app.services.handle_delivery import DeliveryHandlers

router = APIRouter(prefix="/api/v1/deliveries", tags=["deliveries"])


@router.get("")
async def list_deliveries(
    address_id: str | None = Query(None),
    sale_id: str | None = Query(None),
    handlers: DeliveryHandlers = Depends(get_delivery_handlers),
):
    found = await handlers.list_deliveries(
        {"address_id": address_id, "sale_id": sale_id},
    )
    if not found:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return {
        "deliveries": [
            DeliveryOut.model_validate(d).model_dump(mode="json") for d in found
        ],
    }
