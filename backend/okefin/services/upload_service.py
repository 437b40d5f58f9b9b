import shutil
import time
from pathlib import Path

from fastapi import UploadFile

from okefin import schemas
from okefin.core.config import settings
from okefin.core.logger import setup_logger

logger = setup_logger("services.upload")


class UploadService:
    def save(self, file: UploadFile) -> schemas.UploadResponse:
        upload_dir = Path(settings.UPLOAD_DIR)
        upload_dir.mkdir(parents=True, exist_ok=True)

        filename = f"{time.time_ns()}{Path(file.filename or '').suffix}"
        with open(upload_dir / filename, "wb") as destination:
            shutil.copyfileobj(file.file, destination)

        logger.info(f"Stored upload {file.filename} as {filename}")
        return schemas.UploadResponse(url=f"/uploads/{filename}")

upload_service = UploadService()
