from pydantic import BaseModel, Field
from typing import List, Optional

from .common import Pagination

class AlamatBase(BaseModel):
    judul_alamat: Optional[str] = None
    nama_penerima: str = Field(..., min_length=1)
    no_telp: str = Field(..., min_length=1)
    detail_alamat: str = Field(..., min_length=1)

class AlamatCreate(AlamatBase):
    pass

class AlamatUpdate(BaseModel):
    judul_alamat: Optional[str] = None
    nama_penerima: Optional[str] = None
    no_telp: Optional[str] = None
    detail_alamat: Optional[str] = None

class AlamatResponse(BaseModel):
    id: int
    judul_alamat: Optional[str] = None
    nama_penerima: Optional[str] = None
    no_telp: Optional[str] = None
    detail_alamat: Optional[str] = None

class AlamatList(BaseModel):
    alamat: List[AlamatResponse]
    pagination: Pagination
