from typing import List

from sqlalchemy.orm import Session

from okefin import models, schemas
from okefin.core.exceptions import NotFoundError, ValidationFailedError
from okefin.core.logger import setup_logger
from okefin.database.database import unit_of_work
from okefin.repositories import (
    CategoryRepository,
    FotoProdukRepository,
    ProdukRepository,
    TokoRepository,
    category_repository,
    foto_produk_repository,
    produk_repository,
    toko_repository
)
from okefin.utils.parse import build_pagination, format_price, generate_slug, parse_price

logger = setup_logger("services.produk")


class ProdukService:
    """
    Produk management for the caller's own toko.

    Every create, update and delete also writes a LogProduk snapshot so that
    order lines keep the name and price the buyer actually saw.
    """

    def __init__(
        self,
        repository: ProdukRepository,
        toko: TokoRepository,
        foto: FotoProdukRepository,
        categories: CategoryRepository
    ):
        self.repository = repository
        self.toko = toko
        self.foto = foto
        self.categories = categories

    def to_response(self, db: Session, produk: models.Produk) -> schemas.ProdukResponse:
        return schemas.ProdukResponse(
            id=produk.produk_id,
            nama_produk=produk.nama_produk,
            slug=produk.slug or "",
            harga=parse_price(produk.harga_konsumen),
            stok=produk.stok,
            id_category=produk.category_id,
            url_fotos=[foto.url for foto in self.foto.get_by_produk(db, produk.produk_id)],
            deskripsi=produk.deskripsi,
            toko_id=produk.toko_id,
            created_at=produk.created_at,
            updated_at=produk.updated_at,
        )

    def _get_owned(self, db: Session, produk_id: int, user_id: int) -> models.Produk:
        produk = self.repository.get_owned(db, produk_id, user_id)
        if not produk:
            raise NotFoundError("produk not found or access denied", message="Produk not found")
        return produk

    def _require_category(self, db: Session, category_id: int) -> None:
        if not self.categories.exists(db, category_id):
            raise ValidationFailedError("invalid category ID")

    def _replace_fotos(self, db: Session, produk_id: int, urls: List[str]) -> None:
        self.foto.delete_by_produk(db, produk_id)
        self.foto.create_many(db, produk_id, urls)

    def create(self, db: Session, user_id: int, produk_in: schemas.ProdukCreate) -> schemas.ProdukResponse:
        toko = self.toko.get_by_user(db, user_id)
        if not toko:
            raise NotFoundError("toko not found", message="Toko not found")
        self._require_category(db, produk_in.id_category)

        harga = format_price(produk_in.harga)
        with unit_of_work(db):
            produk = self.repository.create(db, models.Produk(
                nama_produk=produk_in.nama_produk,
                slug=generate_slug(produk_in.nama_produk),
                harga_reseller=harga,
                harga_konsumen=harga,
                stok=produk_in.stok,
                deskripsi=produk_in.deskripsi,
                toko_id=toko.toko_id,
                category_id=produk_in.id_category,
            ))
            self.foto.create_many(db, produk.produk_id, produk_in.url_fotos)
            self.repository.create_log(db, produk)

        logger.info(f"Created produk {produk.produk_id} in toko {toko.toko_id}")
        return self.to_response(db, produk)

    def get_by_user_toko(self, db: Session, user_id: int, page: int, limit: int) -> schemas.ProdukList:
        toko = self.toko.get_by_user(db, user_id)
        if not toko:
            raise NotFoundError("toko not found", message="Toko not found")
        produk, total = self.repository.get_by_toko(db, toko.toko_id, skip=(page - 1) * limit, limit=limit)
        return schemas.ProdukList(
            produk=[self.to_response(db, p) for p in produk],
            pagination=build_pagination(page, limit, total),
        )

    def get(self, db: Session, produk_id: int, user_id: int) -> schemas.ProdukResponse:
        return self.to_response(db, self._get_owned(db, produk_id, user_id))

    def update(self, db: Session, produk_id: int, user_id: int, produk_in: schemas.ProdukUpdate) -> schemas.ProdukResponse:
        produk = self._get_owned(db, produk_id, user_id)
        if produk_in.id_category:
            self._require_category(db, produk_in.id_category)

        with unit_of_work(db):
            if produk_in.nama_produk:
                produk.nama_produk = produk_in.nama_produk
                produk.slug = generate_slug(produk_in.nama_produk)
            if produk_in.harga and produk_in.harga > 0:
                produk.harga_reseller = format_price(produk_in.harga)
                produk.harga_konsumen = format_price(produk_in.harga)
            if produk_in.stok and produk_in.stok > 0:
                produk.stok = produk_in.stok
            if produk_in.id_category:
                produk.category_id = produk_in.id_category
            if produk_in.deskripsi:
                produk.deskripsi = produk_in.deskripsi
            # A new photo list replaces the old one entirely
            if produk_in.url_fotos:
                self._replace_fotos(db, produk.produk_id, produk_in.url_fotos)
            self.repository.update(db, produk)
            self.repository.create_log(db, produk)

        return self.to_response(db, produk)

    def delete(self, db: Session, produk_id: int, user_id: int) -> None:
        if not self.repository.is_owned_by(db, produk_id, user_id):
            raise NotFoundError("access denied", message="Produk not found")

        with unit_of_work(db):
            produk = self.repository.get(db, produk_id)
            self.repository.create_log(db, produk)
            self.foto.delete_by_produk(db, produk_id)
            self.repository.delete(db, produk)

        logger.info(f"User {user_id} deleted produk {produk_id}")

produk_service = ProdukService(produk_repository, toko_repository, foto_produk_repository, category_repository)
