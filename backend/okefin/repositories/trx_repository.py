from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload
from okefin import models

class TrxRepository:
    def get_owned(self, db: Session, trx_id: int, user_id: int) -> Optional[models.Trx]:
        return db.query(models.Trx).filter(
            models.Trx.trx_id == trx_id,
            models.Trx.user_id == user_id
        ).first()

    def get_by_user(self, db: Session, user_id: int, skip: int = 0, limit: int = 10) -> Tuple[List[models.Trx], int]:
        query = db.query(models.Trx).filter(models.Trx.user_id == user_id)
        total = query.count()
        trx = query.order_by(models.Trx.trx_id).offset(skip).limit(limit).all()
        return trx, total

    def create(self, db: Session, trx: models.Trx) -> models.Trx:
        db.add(trx)
        db.flush()
        return trx

    def update(self, db: Session, trx: models.Trx) -> models.Trx:
        db.add(trx)
        db.flush()
        return trx

    def create_detail(self, db: Session, detail: models.DetailTrx) -> models.DetailTrx:
        db.add(detail)
        db.flush()
        return detail

    def get_details(self, db: Session, trx_id: int) -> List[models.DetailTrx]:
        return (
            db.query(models.DetailTrx)
            .options(joinedload(models.DetailTrx.log_produk))
            .filter(models.DetailTrx.trx_id == trx_id)
            .order_by(models.DetailTrx.detail_trx_id)
            .all()
        )

trx_repository = TrxRepository()
