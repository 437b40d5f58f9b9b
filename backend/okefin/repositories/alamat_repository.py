from typing import List, Optional, Tuple

from sqlalchemy.orm import Session
from okefin import models

class AlamatRepository:
    def get(self, db: Session, alamat_id: int) -> Optional[models.Alamat]:
        return db.query(models.Alamat).filter(models.Alamat.alamat_id == alamat_id).first()

    def get_by_user(self, db: Session, user_id: int, skip: int = 0, limit: int = 10) -> Tuple[List[models.Alamat], int]:
        query = db.query(models.Alamat).filter(models.Alamat.user_id == user_id)
        total = query.count()
        alamat = query.order_by(models.Alamat.alamat_id).offset(skip).limit(limit).all()
        return alamat, total

    def is_owned_by(self, db: Session, alamat_id: int, user_id: int) -> bool:
        return db.query(models.Alamat).filter(
            models.Alamat.alamat_id == alamat_id,
            models.Alamat.user_id == user_id
        ).count() > 0

    def create(self, db: Session, alamat: models.Alamat) -> models.Alamat:
        db.add(alamat)
        db.flush()
        return alamat

    def update(self, db: Session, alamat: models.Alamat) -> models.Alamat:
        db.add(alamat)
        db.flush()
        return alamat

    def delete(self, db: Session, alamat: models.Alamat) -> None:
        db.delete(alamat)
        db.flush()

alamat_repository = AlamatRepository()
