from typing import Any, Dict, Optional

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from okefin import schemas
from okefin.core.config import settings
from okefin.core.logger import setup_logger

logger = setup_logger("services.wilayah")

UNKNOWN_PROVINCE = "Unknown Province"
UNKNOWN_CITY = "Unknown City"


class WilayahService:
    """
    Province and city names from the public Indonesian region API.

    A failed lookup never fails the request: callers get a placeholder name.
    """

    @retry(
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
        reraise=True
    )
    def _fetch(self, path: str) -> Optional[Dict[str, Any]]:
        url = f"{settings.WILAYAH_API_URL}/{path}"
        logger.debug(f"Requesting region data from: {url}")
        response = requests.get(url, timeout=settings.WILAYAH_TIMEOUT)
        if response.status_code != 200:
            logger.warning(f"Region lookup {url} returned {response.status_code}")
            return None
        return response.json()

    def _lookup(self, path: str) -> Optional[Dict[str, Any]]:
        try:
            data = self._fetch(path)
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Region lookup {path} failed: {str(e)}")
            return None
        return data if isinstance(data, dict) and data.get("name") else None

    def get_provinsi(self, provinsi_id: Optional[str]) -> Optional[schemas.ProvinsiResponse]:
        if not provinsi_id:
            return None
        data = self._lookup(f"province/{provinsi_id}.json")
        if data is None:
            return schemas.ProvinsiResponse(id=provinsi_id, name=UNKNOWN_PROVINCE)
        return schemas.ProvinsiResponse(id=str(data.get("id", provinsi_id)), name=data["name"])

    def get_kota(self, kota_id: Optional[str]) -> Optional[schemas.KotaResponse]:
        if not kota_id:
            return None
        data = self._lookup(f"regency/{kota_id}.json")
        if data is None:
            return schemas.KotaResponse(id=kota_id, name=UNKNOWN_CITY)
        province_id = data.get("province_id")
        return schemas.KotaResponse(
            id=str(data.get("id", kota_id)),
            province_id=str(province_id) if province_id is not None else None,
            name=data["name"]
        )

wilayah_service = WilayahService()
