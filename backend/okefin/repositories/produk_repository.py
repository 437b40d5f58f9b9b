from typing import List, Optional, Tuple

from sqlalchemy.orm import Session
from okefin import models

class ProdukRepository:
    def get(self, db: Session, produk_id: int, for_update: bool = False) -> Optional[models.Produk]:
        query = db.query(models.Produk).filter(models.Produk.produk_id == produk_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def get_owned(self, db: Session, produk_id: int, user_id: int) -> Optional[models.Produk]:
        """
        Fetch a produk only if it belongs to a toko owned by ``user_id``.

        This is the capability check used by the produk management operations;
        buyers placing orders go through ``get`` instead.
        """
        return (
            db.query(models.Produk)
            .join(models.Toko, models.Toko.toko_id == models.Produk.toko_id)
            .filter(models.Produk.produk_id == produk_id, models.Toko.user_id == user_id)
            .first()
        )

    def is_owned_by(self, db: Session, produk_id: int, user_id: int) -> bool:
        return (
            db.query(models.Produk)
            .join(models.Toko, models.Toko.toko_id == models.Produk.toko_id)
            .filter(models.Produk.produk_id == produk_id, models.Toko.user_id == user_id)
            .count() > 0
        )

    def get_by_toko(self, db: Session, toko_id: int, skip: int = 0, limit: int = 10) -> Tuple[List[models.Produk], int]:
        query = db.query(models.Produk).filter(models.Produk.toko_id == toko_id)
        total = query.count()
        produk = query.order_by(models.Produk.produk_id).offset(skip).limit(limit).all()
        return produk, total

    def create(self, db: Session, produk: models.Produk) -> models.Produk:
        db.add(produk)
        db.flush()
        return produk

    def update(self, db: Session, produk: models.Produk) -> models.Produk:
        db.add(produk)
        db.flush()
        return produk

    def delete(self, db: Session, produk: models.Produk) -> None:
        db.delete(produk)
        db.flush()

    def decrement_stock(self, db: Session, produk_id: int, jumlah: int) -> bool:
        # Guarded update: matches nothing when the stock is already short
        updated = db.query(models.Produk).filter(
            models.Produk.produk_id == produk_id,
            models.Produk.stok >= jumlah
        ).update(
            {models.Produk.stok: models.Produk.stok - jumlah},
            synchronize_session="fetch"
        )
        db.flush()
        return updated == 1

    def create_log(self, db: Session, produk: models.Produk) -> models.LogProduk:
        log = models.LogProduk.from_produk(produk)
        db.add(log)
        db.flush()
        return log

produk_repository = ProdukRepository()
