from pydantic import BaseModel
from typing import Optional

class ProvinsiResponse(BaseModel):
    id: str
    name: str

class KotaResponse(BaseModel):
    id: str
    province_id: Optional[str] = None
    name: str
