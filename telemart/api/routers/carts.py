#telemart/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from telemart.api.deps import get_mailer, require_user
from telemart.data.database import get_db
from telemart.domain.schemas import CartItemOut, ItemIn, MessageOut
from telemart.services.cart_service import CartService
from telemart.services.mail_service import Mailer

router = APIRouter(tags=["cart"])


@router.post("/cartpost", response_model=CartItemOut)
def add_item(
    payload: ItemIn,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    return CartService(db).add_item(
        user_id=user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.get("/cart", response_model=List[CartItemOut])
def list_cart(
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    return CartService(db).list_items(user_id)


@router.delete("/cart/{item_id}", response_model=MessageOut)
def delete_item(
    item_id: int,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    CartService(db).delete_item(user_id, item_id)
    return {"message": "Cart item deleted successfully"}


@router.post("/cart/send-email", response_model=MessageOut)
@router.post("/send-cart-email", response_model=MessageOut, include_in_schema=False)
def send_cart_email(
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
):
    """
    Wysyla koszyk mailem i czysci go. Przy bledzie wysylki koszyk zostaje.
    """
    CartService(db, mailer=mailer).send_cart_email(user_id)
    return {"message": "Cart sent to email and cleared successfully"}
