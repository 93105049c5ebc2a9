from sqlalchemy import Column, Integer, String

from telemart.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(150), nullable=False, unique=True)
    password = Column(String(100), nullable=False)  # bcrypt hash
    name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    phone_number = Column(String(32), nullable=False, unique=True)
