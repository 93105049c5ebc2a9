# telemart/repos/cart_repo.py
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from telemart.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_item(self, item_id: int) -> CartItemModel | None:
        return self.db.get(CartItemModel, item_id)

    def get_cart_items(self, user_id: int) -> list[CartItemModel]:
        # kolejnosc wstawiania (id rosnaco)
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(CartItemModel.user_id == user_id)
                .order_by(CartItemModel.id)
            ).scalars()
        )

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_cart_item(self, item: CartItemModel):
        self.db.delete(item)
        self.db.commit()

    def clear_cart(self, user_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.user_id == user_id)
        )
        self.db.commit()
        return result.rowcount
