from typing import List, Optional, Tuple

from sqlalchemy.orm import Session
from okefin import models

class UserRepository:
    def get(self, db: Session, user_id: int) -> Optional[models.User]:
        return db.query(models.User).filter(models.User.user_id == user_id).first()

    def get_by_email(self, db: Session, email: str) -> Optional[models.User]:
        return db.query(models.User).filter(models.User.email == email).first()

    def get_by_no_telp(self, db: Session, no_telp: str) -> Optional[models.User]:
        return db.query(models.User).filter(models.User.no_telp == no_telp).first()

    def get_all(self, db: Session, skip: int = 0, limit: int = 10) -> Tuple[List[models.User], int]:
        query = db.query(models.User)
        total = query.count()
        users = query.order_by(models.User.user_id).offset(skip).limit(limit).all()
        return users, total

    def email_taken_by_other(self, db: Session, email: str, user_id: int) -> bool:
        return db.query(models.User).filter(
            models.User.email == email,
            models.User.user_id != user_id
        ).count() > 0

    def create(self, db: Session, user: models.User) -> models.User:
        db.add(user)
        db.flush()
        return user

    def update(self, db: Session, user: models.User) -> models.User:
        db.add(user)
        db.flush()
        return user

user_repository = UserRepository()
