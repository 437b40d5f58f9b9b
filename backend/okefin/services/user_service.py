from sqlalchemy.orm import Session

from okefin import models, schemas
from okefin.core.exceptions import ConflictError, NotFoundError
from okefin.core.logger import setup_logger
from okefin.database.database import unit_of_work
from okefin.repositories import UserRepository, user_repository
from okefin.services.wilayah_service import WilayahService, wilayah_service
from okefin.utils.parse import build_pagination

logger = setup_logger("services.user")


class UserService:
    def __init__(self, repository: UserRepository, wilayah: WilayahService):
        self.repository = repository
        self.wilayah = wilayah

    def to_response(self, user: models.User) -> schemas.UserResponse:
        return schemas.UserResponse(
            id=user.user_id,
            nama=user.nama,
            no_telp=user.no_telp,
            tanggal_lahir=user.tanggal_lahir,
            jenis_kelamin=user.jenis_kelamin,
            tentang=user.tentang,
            pekerjaan=user.pekerjaan,
            email=user.email,
            id_provinsi=self.wilayah.get_provinsi(user.id_provinsi),
            id_kota=self.wilayah.get_kota(user.id_kota),
            is_admin=bool(user.is_admin),
        )

    def get_profile(self, db: Session, user_id: int) -> schemas.UserResponse:
        user = self.repository.get(db, user_id)
        if not user:
            raise NotFoundError("user not found", message="User not found")
        return self.to_response(user)

    def update_profile(self, db: Session, user_id: int, user_in: schemas.UserUpdate) -> schemas.UserResponse:
        user = self.repository.get(db, user_id)
        if not user:
            raise NotFoundError("user not found", message="User not found")

        with unit_of_work(db):
            if user_in.email and user_in.email != user.email:
                if self.repository.email_taken_by_other(db, user_in.email, user_id):
                    raise ConflictError("email already exists")
                user.email = user_in.email

            for field in ("nama", "tanggal_lahir", "jenis_kelamin", "tentang", "pekerjaan", "id_provinsi", "id_kota"):
                value = getattr(user_in, field)
                if value:
                    setattr(user, field, value)

            self.repository.update(db, user)

        logger.info(f"User {user_id} updated profile")
        return self.to_response(user)

    def get_all(self, db: Session, page: int, limit: int) -> schemas.UserList:
        users, total = self.repository.get_all(db, skip=(page - 1) * limit, limit=limit)
        return schemas.UserList(
            users=[self.to_response(user) for user in users],
            pagination=build_pagination(page, limit, total),
        )

user_service = UserService(user_repository, wilayah_service)
