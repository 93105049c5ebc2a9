from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from telemart.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_by_username(self, username: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.username == username)
        ).scalar_one_or_none()

    def find_conflicting(self, username: str, email: str, phone_number: str) -> list[UserModel]:
        return list(
            self.db.execute(
                select(UserModel).where(
                    or_(
                        UserModel.username == username,
                        UserModel.email == email,
                        UserModel.phone_number == phone_number,
                    )
                )
            ).scalars()
        )

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def rollback(self):
        self.db.rollback()
