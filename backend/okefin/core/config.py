import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BACKEND_ROOT = Path(__file__).parent.parent.parent


class Settings:
    def __init__(self):
        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "Okefin Service")
        self.API_PREFIX = os.getenv("API_PREFIX", "")
        self.PORT = int(os.getenv("PORT", "3000"))

        self.DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./okefin.db")

        self.JWT_SECRET = os.getenv("JWT_SECRET", "")
        self.JWT_ALGORITHM = "HS256"
        self.JWT_EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "24"))
        self.BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

        self.UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")

        self.WILAYAH_API_URL = os.getenv(
            "WILAYAH_API_URL", "https://www.emsifa.com/api-wilayah-indonesia/api"
        ).rstrip("/")
        self.WILAYAH_TIMEOUT = float(os.getenv("WILAYAH_TIMEOUT", "5"))

        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.LOG_DIR = Path(os.getenv("LOG_DIR", str(BACKEND_ROOT / "logs")))


settings = Settings()
