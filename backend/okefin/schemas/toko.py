from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from .common import Pagination

class TokoBase(BaseModel):
    nama_toko: str = Field(..., min_length=1)
    url_foto: Optional[str] = None

class TokoCreate(TokoBase):
    pass

class TokoUpdate(BaseModel):
    nama_toko: Optional[str] = None
    url_foto: Optional[str] = None

class TokoResponse(BaseModel):
    id: int
    nama_toko: str
    url_foto: Optional[str] = None
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class TokoList(BaseModel):
    toko: List[TokoResponse]
    pagination: Pagination
