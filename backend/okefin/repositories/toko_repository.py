from typing import List, Optional, Tuple

from sqlalchemy.orm import Session
from okefin import models

class TokoRepository:
    def get(self, db: Session, toko_id: int) -> Optional[models.Toko]:
        return db.query(models.Toko).filter(models.Toko.toko_id == toko_id).first()

    def get_by_user(self, db: Session, user_id: int) -> Optional[models.Toko]:
        return db.query(models.Toko).filter(
            models.Toko.user_id == user_id
        ).order_by(models.Toko.toko_id).first()

    def get_all(self, db: Session, skip: int = 0, limit: int = 10) -> Tuple[List[models.Toko], int]:
        query = db.query(models.Toko)
        total = query.count()
        toko = query.order_by(models.Toko.toko_id).offset(skip).limit(limit).all()
        return toko, total

    def is_owned_by(self, db: Session, toko_id: int, user_id: int) -> bool:
        return db.query(models.Toko).filter(
            models.Toko.toko_id == toko_id,
            models.Toko.user_id == user_id
        ).count() > 0

    def create(self, db: Session, toko: models.Toko) -> models.Toko:
        db.add(toko)
        db.flush()
        return toko

    def update(self, db: Session, toko: models.Toko) -> models.Toko:
        db.add(toko)
        db.flush()
        return toko

    def delete(self, db: Session, toko: models.Toko) -> None:
        db.delete(toko)
        db.flush()

toko_repository = TokoRepository()
