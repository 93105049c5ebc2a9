# telemart/repos/product_repo.py
from sqlalchemy import select, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from telemart.data.models.product import ProductModel

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

# jawne id nie przesuwaja sekwencji w postgresie
_SYNC_PG_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('products', 'id'), "
    "(SELECT COALESCE(MAX(id), 1) FROM products))"
)


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self) -> list[ProductModel]:
        return list(self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars())

    def list_by_category(self, category: str) -> list[ProductModel]:
        return list(
            self.db.execute(
                select(ProductModel)
                .where(ProductModel.category == category)
                .order_by(ProductModel.id)
            ).scalars()
        )

    def insert_skip_duplicates(self, rows: list[dict]) -> int:
        """
        INSERT ... ON CONFLICT DO NOTHING wiersz po wierszu, w jednej transakcji.
        Zwraca liczbe faktycznie wstawionych wierszy.
        """
        dialect = self.db.get_bind().dialect.name
        insert = _DIALECT_INSERTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Skip-duplicates insert not supported for dialect {dialect}")

        inserted = 0
        try:
            for row in rows:
                stmt = insert(ProductModel).values(**row).on_conflict_do_nothing()
                result = self.db.execute(stmt)
                inserted += max(result.rowcount, 0)
            if dialect == "postgresql" and any("id" in row for row in rows):
                self.db.execute(_SYNC_PG_SEQUENCE)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return inserted
