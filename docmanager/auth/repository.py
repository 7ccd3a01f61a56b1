from sqlalchemy import select
from sqlalchemy.orm import Session
from docmanager.auth.models import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        # exact, case-sensitive match on the stored value
        return self.db.scalars(select(User).where(User.email == email)).first()

    def create(self, name: str, email: str, password_hash: str) -> User:
        u = User(name=name, email=email, password_hash=password_hash)
        self.db.add(u)
        self.db.flush()
        return u
