from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from telemart.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)

    product = relationship("ProductModel", lazy="joined")
