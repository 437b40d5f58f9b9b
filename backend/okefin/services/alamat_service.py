from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from okefin import models, schemas
from okefin.core.exceptions import ConflictError, NotFoundError
from okefin.core.logger import setup_logger
from okefin.database.database import unit_of_work
from okefin.repositories import AlamatRepository, alamat_repository
from okefin.utils.parse import build_pagination

logger = setup_logger("services.alamat")


class AlamatService:
    def __init__(self, repository: AlamatRepository):
        self.repository = repository

    @staticmethod
    def to_response(alamat: models.Alamat) -> schemas.AlamatResponse:
        return schemas.AlamatResponse(
            id=alamat.alamat_id,
            judul_alamat=alamat.judul_alamat,
            nama_penerima=alamat.nama_penerima,
            no_telp=alamat.no_telp,
            detail_alamat=alamat.detail_alamat,
        )

    def _get_owned(self, db: Session, alamat_id: int, user_id: int) -> models.Alamat:
        if not self.repository.is_owned_by(db, alamat_id, user_id):
            raise NotFoundError("alamat not found or access denied", message="Alamat not found")
        return self.repository.get(db, alamat_id)

    def create(self, db: Session, user_id: int, alamat_in: schemas.AlamatCreate) -> schemas.AlamatResponse:
        with unit_of_work(db):
            alamat = self.repository.create(db, models.Alamat(user_id=user_id, **alamat_in.model_dump()))
        logger.info(f"User {user_id} added alamat {alamat.alamat_id}")
        return self.to_response(alamat)

    def get_by_user(self, db: Session, user_id: int, page: int, limit: int) -> schemas.AlamatList:
        alamat, total = self.repository.get_by_user(db, user_id, skip=(page - 1) * limit, limit=limit)
        return schemas.AlamatList(
            alamat=[self.to_response(a) for a in alamat],
            pagination=build_pagination(page, limit, total),
        )

    def get(self, db: Session, alamat_id: int, user_id: int) -> schemas.AlamatResponse:
        return self.to_response(self._get_owned(db, alamat_id, user_id))

    def update(self, db: Session, alamat_id: int, user_id: int, alamat_in: schemas.AlamatUpdate) -> schemas.AlamatResponse:
        alamat = self._get_owned(db, alamat_id, user_id)
        with unit_of_work(db):
            for field, value in alamat_in.model_dump().items():
                if value:
                    setattr(alamat, field, value)
            self.repository.update(db, alamat)
        return self.to_response(alamat)

    def delete(self, db: Session, alamat_id: int, user_id: int) -> None:
        alamat = self._get_owned(db, alamat_id, user_id)
        try:
            with unit_of_work(db):
                self.repository.delete(db, alamat)
        except IntegrityError:
            raise ConflictError("alamat is used by a transaksi", message="Failed to delete alamat")
        logger.info(f"User {user_id} deleted alamat {alamat_id}")

alamat_service = AlamatService(alamat_repository)
