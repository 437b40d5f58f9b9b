from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from okefin import models, schemas
from okefin.core.exceptions import ConflictError, NotFoundError
from okefin.core.logger import setup_logger
from okefin.database.database import unit_of_work
from okefin.repositories import TokoRepository, toko_repository
from okefin.utils.parse import build_pagination

logger = setup_logger("services.toko")


class TokoService:
    def __init__(self, repository: TokoRepository):
        self.repository = repository

    @staticmethod
    def to_response(toko: models.Toko) -> schemas.TokoResponse:
        return schemas.TokoResponse(
            id=toko.toko_id,
            nama_toko=toko.nama_toko or "",
            url_foto=toko.url_foto,
            user_id=toko.user_id,
            created_at=toko.created_at,
            updated_at=toko.updated_at,
        )

    def _get_owned(self, db: Session, toko_id: int, user_id: int) -> models.Toko:
        toko = self.repository.get(db, toko_id)
        if not toko:
            raise NotFoundError("toko not found", message="Toko not found")
        if toko.user_id != user_id:
            raise NotFoundError("access denied", message="Toko not found")
        return toko

    def create_default(self, db: Session, user: models.User) -> models.Toko:
        """Store created alongside every new user; the caller owns the transaction."""
        toko = models.Toko(user_id=user.user_id, nama_toko=f"Toko {user.nama}", url_foto="")
        return self.repository.create(db, toko)

    def create(self, db: Session, user_id: int, toko_in: schemas.TokoCreate) -> schemas.TokoResponse:
        with unit_of_work(db):
            toko = self.repository.create(db, models.Toko(
                user_id=user_id,
                nama_toko=toko_in.nama_toko,
                url_foto=toko_in.url_foto or "",
            ))
        logger.info(f"User {user_id} created toko {toko.toko_id}")
        return self.to_response(toko)

    def get(self, db: Session, toko_id: int, user_id: int) -> schemas.TokoResponse:
        return self.to_response(self._get_owned(db, toko_id, user_id))

    def get_by_user(self, db: Session, user_id: int) -> schemas.TokoResponse:
        toko = self.repository.get_by_user(db, user_id)
        if not toko:
            raise NotFoundError("toko not found", message="Toko not found")
        return self.to_response(toko)

    def get_all(self, db: Session, page: int, limit: int) -> schemas.TokoList:
        toko, total = self.repository.get_all(db, skip=(page - 1) * limit, limit=limit)
        return schemas.TokoList(
            toko=[self.to_response(t) for t in toko],
            pagination=build_pagination(page, limit, total),
        )

    def update(self, db: Session, toko_id: int, user_id: int, toko_in: schemas.TokoUpdate) -> schemas.TokoResponse:
        toko = self._get_owned(db, toko_id, user_id)
        with unit_of_work(db):
            if toko_in.nama_toko:
                toko.nama_toko = toko_in.nama_toko
            if toko_in.url_foto:
                toko.url_foto = toko_in.url_foto
            self.repository.update(db, toko)
        return self.to_response(toko)

    def delete(self, db: Session, toko_id: int, user_id: int) -> None:
        toko = self._get_owned(db, toko_id, user_id)
        try:
            with unit_of_work(db):
                self.repository.delete(db, toko)
        except IntegrityError:
            raise ConflictError("toko still has produk", message="Failed to delete toko")
        logger.info(f"User {user_id} deleted toko {toko_id}")

toko_service = TokoService(toko_repository)
