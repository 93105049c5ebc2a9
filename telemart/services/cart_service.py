# telemart/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from telemart.data.models.cart_item import CartItemModel
from telemart.domain.errors import EmptyCart, InvalidInput, NotFound
from telemart.repos.cart_repo import CartRepo
from telemart.repos.product_repo import ProductRepo
from telemart.repos.user_repo import UserRepo
from telemart.services.mail_service import Mailer
from telemart.services.product_service import product_to_dict
from telemart.utils.logging import get_logger

logger = get_logger(__name__)

CART_EMAIL_SUBJECT = "Your Cart Details - RSN TeleMart"


def _item_to_dict(item: CartItemModel) -> Dict[str, Any]:
    return {
        "id": item.id,
        "product_id": item.product_id,
        "quantity": item.quantity,
        "user_id": item.user_id,
        "product": product_to_dict(item.product),
    }


def _money(value: Decimal) -> str:
    return f"${Decimal(value):.2f}"


def render_cart_summary(username: str, items: List[CartItemModel]) -> str:
    """
    Tresc maila: jedna linia na pozycje "<nazwa> - <ilosc> x $<cena jednostkowa>",
    potem suma calego koszyka.
    """
    lines = [
        f"{i.product.name} - {i.quantity} x {_money(i.product.price)}"
        for i in items
    ]
    total = sum((Decimal(i.product.price) * i.quantity for i in items), Decimal("0.00"))

    return (
        f"Hello {username},\n\n"
        f"Here are your cart details:\n\n"
        + "\n".join(lines)
        + f"\n\nTotal: {_money(total)}"
        + "\n\nThank you for shopping with RSN TeleMart!"
    )


class CartService:
    """
    Koszyk zalogowanego usera.
    commands (add, delete, send_cart_email) modyfikuja stan
    query (list_items) tylko odczyt
    Kazda operacja dostaje user_id z sesji, nigdy z requestu.
    """

    def __init__(self, db: Session, mailer: Mailer | None = None):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)
        self.users = UserRepo(db)
        self.mailer = mailer

    #query - odczyt
    def list_items(self, user_id: int) -> List[Dict[str, Any]]:
        return [_item_to_dict(i) for i in self.repo.get_cart_items(user_id)]

    #commands
    def add_item(self, user_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise InvalidInput("Quantity must be a positive integer")

        if self.products.get_product(product_id) is None:
            raise InvalidInput(f"Product {product_id} does not exist")

        created = self.repo.add_cart_item(
            CartItemModel(
                product_id=product_id,
                quantity=quantity,
                user_id=user_id,
            )
        )

        logger.info(f"Cart item {created.id} (product {product_id} x{quantity}) added for user {user_id}")
        return _item_to_dict(created)

    def delete_item(self, user_id: int, item_id: int):
        item = self._owned_item(user_id, item_id)
        self.repo.delete_cart_item(item)
        logger.info(f"Cart item {item_id} deleted for user {user_id}")

    def send_cart_email(self, user_id: int):
        """
        Use Case: wyslanie koszyka mailem i wyczyszczenie go.

        1. Pobiera usera
        2. Pobiera pozycje koszyka z produktami (pusty -> EmptyCart, bez maila)
        3. Renderuje podsumowanie
        4. Wysyla mail
        5. Dopiero po udanej wysylce czysci koszyk
        """
        if self.mailer is None:
            raise RuntimeError("CartService.send_cart_email requires a mailer")

        user = self.users.get_user(user_id)
        if not user:
            raise NotFound("User not found")

        items = self.repo.get_cart_items(user_id)
        if not items:
            raise EmptyCart()

        body = render_cart_summary(user.username, items)

        # blad wysylki leci wyzej, koszyk zostaje nietkniety
        self.mailer.send(to=user.email, subject=CART_EMAIL_SUBJECT, body=body)

        removed = self.repo.clear_cart(user_id)
        logger.info(f"Cart of user {user_id} emailed to {user.email} and cleared ({removed} items)")

    def _owned_item(self, user_id: int, item_id: int) -> CartItemModel:
        # brak pozycji i cudza pozycja wygladaja tak samo
        item = self.repo.get_cart_item(item_id)
        if item is None or item.user_id != user_id:
            raise NotFound("Cart item not found")
        return item
