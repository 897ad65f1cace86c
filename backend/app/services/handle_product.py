"""Product Handlers — list, create, full/partial update and delete for products.

Invariants:
    - create and PUT require name and suggested_price; every bad field reported at once
    - PATCH needs >= 1 of name / suggested_price; absent fields keep their stored value
    - suggested_price is always > 0
    - delete is refused once the product appears in any sale
"""

import logging
from typing import Any, Mapping, Sequence

from app.core.domain_types import ProductId
from app.core.enforce_references import check_found
from app.core.filter_config import PRODUCT_FILTERS, build_filters
from app.core.repository_protocols import ProductLike, ProductRepository
from app.core.validate_fields import (
    check_numeric_ids, require_any_field, require_object, validate_payload,
    validate_price, validate_text,
)
from app.services.lookup_guards import forbid_product_sold, require_product

MUTABLE_FIELDS = ("name", "suggested_price")

FIELD_RULES = {
    "name": lambda value: validate_text(value, "name"),
    "suggested_price": validate_price,
}


def _product_id(raw: Any) -> ProductId:
    return ProductId(check_numeric_ids({"product": raw})["product"])


class ProductHandlers:
    """Product endpoints orchestration."""

    def __init__(self, products: ProductRepository, logger: logging.Logger):
        self.products = products
        self.logger = logger

    async def list_products(self, params: Mapping[str, Any]) -> Sequence[ProductLike]:
        filters = build_filters(PRODUCT_FILTERS, params)
        found = await self.products.find_all(filters)
        if found:
            self.logger.info(f"Listing products: {len(found)} found")
        else:
            self.logger.info("No product found")
        return found

    async def create_product(self, payload: Any) -> ProductLike:
        fields = validate_payload(require_object(payload), FIELD_RULES)
        product = await self.products.create(fields)
        self.logger.info(f"Product {product.id} created: {product.name}")
        return product

    async def replace_product(self, product_id: Any, payload: Any) -> ProductLike:
        """Full update: every mutable field required before any write."""
        record_id = _product_id(product_id)
        fields = validate_payload(require_object(payload), FIELD_RULES)
        product = check_found(
            await self.products.update(record_id, fields),
            "Product not found.", "Product", record_id,
        )
        self.logger.info(f"Product {record_id} replaced: {product.name}")
        return product

    async def patch_product(self, product_id: Any, payload: Any) -> ProductLike:
        """Partial update: only supplied fields change."""
        record_id = _product_id(product_id)
        supplied = require_any_field(payload, MUTABLE_FIELDS)
        changes = validate_payload(
            supplied, {key: FIELD_RULES[key] for key in supplied},
        )
        product = check_found(
            await self.products.update(record_id, changes),
            f"There is no product with id {record_id}", "Product", record_id,
        )
        self.logger.info(f"Product {record_id} updated: {', '.join(changes)}")
        return product

    async def delete_product(self, product_id: Any) -> None:
        record_id = _product_id(product_id)
        product = await require_product(self.products, record_id)
        await forbid_product_sold(self.products, record_id)
        await self.products.delete(product)
        self.logger.info(f"Product {record_id} deleted: {product.name}")
