from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from okefin import models, schemas
from okefin.core.exceptions import ConflictError, UnauthorizedError
from okefin.core.logger import setup_logger
from okefin.core.security import create_access_token, hash_password, verify_password
from okefin.database.database import unit_of_work
from okefin.repositories import UserRepository, user_repository
from okefin.services.toko_service import TokoService, toko_service
from okefin.services.user_service import UserService, user_service

logger = setup_logger("services.auth")

LOGIN_FAILED = "No Telp atau kata sandi salah"


class AuthService:
    def __init__(self, repository: UserRepository, users: UserService, toko: TokoService):
        self.repository = repository
        self.users = users
        self.toko = toko

    def register(self, db: Session, register_in: schemas.RegisterRequest) -> schemas.RegisterResponse:
        if self.repository.get_by_email(db, register_in.email):
            raise ConflictError("email already exists")
        if self.repository.get_by_no_telp(db, register_in.no_telp):
            raise ConflictError("no_telp already exists")

        user = models.User(
            nama=register_in.nama,
            kata_sandi=hash_password(register_in.kata_sandi),
            no_telp=register_in.no_telp,
            tanggal_lahir=register_in.tanggal_lahir,
            pekerjaan=register_in.pekerjaan,
            email=register_in.email,
            id_provinsi=register_in.id_provinsi,
            id_kota=register_in.id_kota,
            is_admin=False,
        )
        try:
            with unit_of_work(db):
                self.repository.create(db, user)
                toko = self.toko.create_default(db, user)
        except IntegrityError:
            # Lost a race with a concurrent registration using the same email or phone
            logger.warning(f"Duplicate registration for {register_in.no_telp}")
            raise ConflictError("email or no_telp already exists")

        logger.info(f"Registered user {user.user_id} with toko {toko.toko_id}")
        profile = self.users.to_response(user)
        return schemas.RegisterResponse(**profile.model_dump(), toko=self.toko.to_response(toko))

    def login(self, db: Session, login_in: schemas.LoginRequest) -> schemas.LoginResponse:
        user = self.repository.get_by_no_telp(db, login_in.no_telp)
        if not user or not verify_password(login_in.kata_sandi, user.kata_sandi):
            logger.warning(f"Failed login attempt for {login_in.no_telp}")
            raise UnauthorizedError(LOGIN_FAILED, message="Login failed")

        token = create_access_token(user.user_id, user.email)
        profile = self.users.to_response(user)
        return schemas.LoginResponse(
            **profile.model_dump(include=set(schemas.UserProfile.model_fields)),
            token=token,
        )

auth_service = AuthService(user_repository, user_service, toko_service)
