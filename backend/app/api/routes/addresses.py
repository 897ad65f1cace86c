"""Address Routes — list, create under state/city, partial update and delete.

Invariants:
    - Empty listing answers 204 with no body
    - Create answers 201 with the new id, or 200 with the existing id for a duplicate
    - Path ids arrive as raw strings; numeric checks happen in the handler so the
      rejection message names the offending id
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_address_handlers
from app.schemas.address import AddressOut
from app.services.handle_address import AddressHandlers

router = APIRouter(prefix="/api/v1", tags=["addresses"])


@router.get("/addresses")
async def list_addresses(
    city_id: str | None = Query(None, description="Exact city id"),
    street: str | None = Query(None, description="Substring of the street name"),
    cep: str | None = Query(None, description="Exact 8-digit cep"),
    handlers: AddressHandlers = Depends(get_address_handlers),
):
    """List addresses matching the optional filters; all addresses when none given."""
    found = await handlers.list_addresses(
        {"city_id": city_id, "street": street, "cep": cep},
    )
    if not found:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return {
        "message": "Address found successfully!",
        "address": [AddressOut.model_validate(a).model_dump() for a in found],
    }


@router.post(
    "/states/{state_id}/cities/{city_id}/addresses",
    status_code=status.HTTP_201_CREATED,
)
async def create_address(
    state_id: str,
    city_id: str,
    payload: Any = Body(None),
    handlers: AddressHandlers = Depends(get_address_handlers),
):
    """Add an address to a city. Body: street, number, cep, optional complement."""
    result = await handlers.create_address(state_id, city_id, payload)
    if result.duplicate:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={
                "message": "Address already exists! The address was not added.",
                "address_id": result.address_id,
            },
        )
    return {"address_id": result.address_id}


@router.patch("/addresses/{address_id}")
async def update_address(
    address_id: str,
    payload: Any = Body(None),
    handlers: AddressHandlers = Depends(get_address_handlers),
):
    """Change any of street, number, complement, cep."""
    await handlers.update_address(address_id, payload)
    return {"message": "Address updated successfully!"}


@router.delete(
    "/addresses/{address_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_address(
    address_id: str,
    handlers: AddressHandlers = Depends(get_address_handlers),
):
    """Delete an address that no delivery uses."""
    await handlers.delete_address(address_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
