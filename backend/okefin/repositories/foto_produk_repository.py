from typing import List

from sqlalchemy.orm import Session
from okefin import models

class FotoProdukRepository:
    def get_by_produk(self, db: Session, produk_id: int) -> List[models.FotoProduk]:
        return db.query(models.FotoProduk).filter(
            models.FotoProduk.produk_id == produk_id
        ).order_by(models.FotoProduk.foto_id).all()

    def create_many(self, db: Session, produk_id: int, urls: List[str]) -> List[models.FotoProduk]:
        fotos = [models.FotoProduk(produk_id=produk_id, url=url) for url in urls]
        db.add_all(fotos)
        db.flush()
        return fotos

    def delete_by_produk(self, db: Session, produk_id: int) -> int:
        deleted = db.query(models.FotoProduk).filter(
            models.FotoProduk.produk_id == produk_id
        ).delete(synchronize_session="fetch")
        db.flush()
        return deleted

foto_produk_repository = FotoProdukRepository()
