"""Product RPC commands.

One handler per message pattern.  Each handler parses its payload into
a DTO, calls ``ProductService`` and returns JSON-ready data.
"""

from __future__ import annotations

from typing import Any, Dict, List

from modules.core.exceptions import StoreFailure
from modules.core.rpc import RpcDispatcher
from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    ProductIdDTO,
    ProductOutputDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.exceptions import ProductNotFound, ProductValidationFailed
from modules.products.models import Product
from modules.products.services import ProductService

dispatcher = RpcDispatcher(
    handled=(ProductNotFound, ProductValidationFailed, StoreFailure),
)


def serialize(product: Product) -> Dict[str, Any]:
    return ProductOutputDTO.from_entity(product).model_dump(mode="json", by_alias=True)


@dispatcher.command("create_product")
def create_product(service: ProductService, payload: Any) -> Dict[str, Any]:
    dto = CreateProductDTO.model_validate(payload)
    return serialize(service.create(dto))


@dispatcher.command("find_all_products")
def find_all_products(service: ProductService, payload: Any) -> Dict[str, Any]:
    pagination = PaginationDTO.model_validate(payload)
    result = service.find_all(pagination)
    return {
        "data": [serialize(product) for product in result.data],
        "meta": result.meta.model_dump(mode="json", by_alias=True),
    }


@dispatcher.command("find_one_product")
def find_one_product(service: ProductService, payload: Any) -> Dict[str, Any]:
    dto = ProductIdDTO.model_validate(payload)
    return serialize(service.find_one(dto.id))


@dispatcher.command("update_product")
def update_product(service: ProductService, payload: Any) -> Dict[str, Any]:
    # The id selects the row; UpdateProductDTO.changes() drops it from the write.
    target = ProductIdDTO.model_validate(payload)
    dto = UpdateProductDTO.model_validate(payload)
    return serialize(service.update(target.id, dto))


@dispatcher.command("delete_product")
def delete_product(service: ProductService, payload: Any) -> Dict[str, Any]:
    dto = ProductIdDTO.model_validate(payload)
    return serialize(service.remove(dto.id))


@dispatcher.command("validate_products")
def validate_products(service: ProductService, payload: Any) -> List[Dict[str, Any]]:
    dto = ValidateProductsDTO.model_validate(payload)
    return [serialize(product) for product in service.validate_products(dto.ids)]
