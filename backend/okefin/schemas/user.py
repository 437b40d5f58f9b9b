from pydantic import BaseModel, EmailStr
from typing import List, Optional
from datetime import date

from .common import Pagination
from .wilayah import ProvinsiResponse, KotaResponse

class UserUpdate(BaseModel):
    nama: Optional[str] = None
    tanggal_lahir: Optional[date] = None
    jenis_kelamin: Optional[str] = None
    tentang: Optional[str] = None
    pekerjaan: Optional[str] = None
    email: Optional[EmailStr] = None
    id_provinsi: Optional[str] = None
    id_kota: Optional[str] = None

class UserProfile(BaseModel):
    nama: str
    no_telp: str
    tanggal_lahir: Optional[date] = None
    jenis_kelamin: Optional[str] = None
    tentang: Optional[str] = None
    pekerjaan: Optional[str] = None
    email: str
    id_provinsi: Optional[ProvinsiResponse] = None
    id_kota: Optional[KotaResponse] = None

class UserResponse(UserProfile):
    id: int
    is_admin: bool = False

class UserList(BaseModel):
    users: List[UserResponse]
    pagination: Pagination
