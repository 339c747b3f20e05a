from sqlalchemy import Column, String

from account_service.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    username = Column(String, nullable=True)
    # Not unique: duplicates are rejected by the registration pre-check only.
    email = Column(String, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
