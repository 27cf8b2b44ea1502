"""Product catalog endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from ...errors import StorefrontError, UnexpectedError
from ...persistence.base import StoreHandle
from ...schemas.products import ProductCreate, ProductModel, ProductUpdate
from ...services import products as product_service
from ..deps import get_store

router = APIRouter(prefix="/products", tags=["products"])

logger = logging.getLogger(__name__)


@router.get("", response_model=List[ProductModel], status_code=status.HTTP_200_OK)
def list_products(store: StoreHandle = Depends(get_store)) -> List[ProductModel]:
    try:
        return [ProductModel.model_validate(item) for item in product_service.list_products(store)]
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error fetching products: {exc}")
        raise UnexpectedError(str(exc)) from exc


@router.post("", response_model=ProductModel, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, store: StoreHandle = Depends(get_store)) -> ProductModel:
    try:
        return ProductModel.model_validate(product_service.create_product(store, payload))
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error creating product: {exc}")
        raise UnexpectedError(str(exc)) from exc


@router.put("/{product_id}", status_code=status.HTTP_200_OK)
def update_product(product_id: str, payload: ProductUpdate, store: StoreHandle = Depends(get_store)) -> dict:
    try:
        product_service.update_product(store, product_id, payload)
        return {"message": "Product updated successfully"}
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error updating product {product_id}: {exc}")
        raise UnexpectedError(str(exc)) from exc


@router.delete("/{product_id}", status_code=status.HTTP_200_OK)
def delete_product(product_id: str, store: StoreHandle = Depends(get_store)) -> dict:
    try:
        product_service.delete_product(store, product_id)
        return {"message": "Product deleted successfully"}
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(f"Error deleting product {product_id}: {exc}")
        raise UnexpectedError(str(exc)) from exc
