# telemart/domain/schemas.py
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class _CamelModel(BaseModel):
    # JSON w camelCase jak we frontendzie, w Pythonie snake_case
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class UserCreate(_CamelModel):
    """Schema dla rejestracji. Puste pola sprawdza serwis po trim."""

    username: str | None = None
    password: str | None = None
    name: str | None = None
    email: str | None = None
    phone_number: str | None = Field(default=None, alias="phoneNumber")


class UserRead(_CamelModel):
    id: int
    username: str
    name: str
    email: str
    phone_number: str = Field(alias="phoneNumber")


class UserCreated(BaseModel):
    message: str
    user: UserRead


class LoginIn(BaseModel):
    username: str | None = None
    password: str | None = None


class LoginOut(_CamelModel):
    message: str
    user_id: int = Field(alias="userId")


class MessageOut(BaseModel):
    message: str


class ProductIn(BaseModel):
    """Rekord produktu w bulk insert."""

    id: int | None = Field(default=None, gt=0)
    name: str = Field(..., min_length=1, max_length=200)
    title: str | None = Field(default=None, max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category: str | None = Field(default=None, max_length=100)


class NewProductsIn(BaseModel):
    # Any - ksztalt sprawdza serwis, zeby zwrocic "data must be an array"
    data: Any = None


class ProductOut(_CamelModel):
    id: int
    name: str
    title: str | None = None
    price: Decimal
    category: str | None = None

    @field_serializer("price")
    def _price_as_float(self, price: Decimal) -> float:
        return float(price)


class ProductsCreated(BaseModel):
    message: str
    count: int


class ItemIn(_CamelModel):
    """Schema dla dodawania produktu do koszyka."""

    # strict - JSON true nie moze stac sie 1
    product_id: int = Field(..., alias="productId", gt=0, strict=True, description="ID produktu (musi być > 0)")
    quantity: int = Field(..., gt=0, strict=True, description="Ilość produktu (musi być > 0)")


class CartItemOut(_CamelModel):
    """Pozycja koszyka razem z produktem."""

    id: int
    product_id: int = Field(alias="productId")
    quantity: int
    user_id: int = Field(alias="userId")
    product: ProductOut

