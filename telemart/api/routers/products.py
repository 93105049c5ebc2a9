# telemart/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from telemart.data.database import get_db
from telemart.domain.schemas import NewProductsIn, ProductOut, ProductsCreated
from telemart.services.product_service import ProductService

router = APIRouter(tags=["products"])


@router.get("/products", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return ProductService(db).list_products()


@router.get("/products/{category}", response_model=List[ProductOut])
def list_products_by_category(category: str, db: Session = Depends(get_db)):
    return ProductService(db).list_by_category(category)


@router.post("/newproducts", response_model=ProductsCreated)
def create_products(payload: NewProductsIn, db: Session = Depends(get_db)):
    count = ProductService(db).bulk_insert(payload.data)
    return {"message": "Products created", "count": count}
