#telemart/data/models/product.py
from sqlalchemy import Column, Integer, Numeric, String

from telemart.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False, unique=True)
    title = Column(String(255), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(100), nullable=True, index=True)
