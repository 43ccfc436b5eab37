# src/catalog/api/v1/router.py
from fastapi import APIRouter

from catalog.api.v1 import categories, products

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(products.router)
api_router.include_router(categories.router)
