# telemart/services/product_service.py
from typing import Any, Dict, List

from pydantic import ValidationError
from sqlalchemy.orm import Session

from telemart.data.models.product import ProductModel
from telemart.domain.errors import InvalidInput
from telemart.domain.schemas import ProductIn
from telemart.repos.product_repo import ProductRepo
from telemart.utils.logging import get_logger

logger = get_logger(__name__)


def product_to_dict(product: ProductModel) -> Dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "title": product.title,
        "price": product.price,
        "category": product.category,
    }


class ProductService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self) -> List[Dict[str, Any]]:
        return [product_to_dict(p) for p in self.repo.list_products()]

    def list_by_category(self, category: str) -> List[Dict[str, Any]]:
        return [product_to_dict(p) for p in self.repo.list_by_category(category)]

    def bulk_insert(self, data: Any) -> int:
        """
        Use Case: bulk insert produktow.
        Rekordy naruszajace unikalnosc (id, name) sa pomijane, nie nadpisywane.
        """
        if data is None or not isinstance(data, list):
            raise InvalidInput("data must be an array")

        rows = []
        for index, record in enumerate(data):
            try:
                product = ProductIn.model_validate(record)
            except ValidationError as e:
                err = e.errors()[0]
                field = ".".join(str(p) for p in err["loc"]) or "record"
                raise InvalidInput(f"data[{index}].{field}: {err['msg']}")
            rows.append(product.model_dump(exclude_none=True))

        inserted = self.repo.insert_skip_duplicates(rows)
        logger.info(f"Bulk insert: {inserted} of {len(rows)} products inserted")
        return inserted
