"""Product Routes — list, create, PUT, PATCH and delete.

Invariants:
    - Empty listing answers 204
    - Create answers 200 with an echo of the product; updates and delete answer 204
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from app.api.dependencies import get_product_handlers
from app.schemas.product import NewProductOut, ProductOut
from app.services.handle_product import ProductHandlers

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("")
async def list_products(
    name: str | None = Query(None, description="Substring of the product name"),
    price_min: str | None = Query(None, description="Minimum suggested price"),
    price_max: str | None = Query(None, description="Maximum suggested price"),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    found = await handlers.list_products(
        {"name": name, "price_min": price_min, "price_max": price_max},
    )
    if not found:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return {"products": [ProductOut.model_validate(p).model_dump() for p in found]}


@router.post("")
async def create_product(
    payload: Any = Body(None),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    product = await handlers.create_product(payload)
    return {
        "message": "Product created successfully!",
        "new_product": NewProductOut.model_validate(product).model_dump(),
    }


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def replace_product(
    product_id: str,
    payload: Any = Body(None),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Replace name and suggested_price (both required)."""
    await handlers.replace_product(product_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_product(
    product_id: str,
    payload: Any = Body(None),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Change name or suggested_price."""
    await handlers.patch_product(product_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Delete a product that was never sold."""
    await handlers.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
