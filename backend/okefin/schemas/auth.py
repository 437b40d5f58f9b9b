from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import date

from .toko import TokoResponse
from .user import UserProfile, UserResponse

class RegisterRequest(BaseModel):
    nama: str = Field(..., min_length=1)
    kata_sandi: str = Field(..., min_length=6)
    no_telp: str = Field(..., min_length=1)
    tanggal_lahir: date
    pekerjaan: str = Field(..., min_length=1)
    email: EmailStr
    id_provinsi: str = Field(..., min_length=1)
    id_kota: str = Field(..., min_length=1)

class LoginRequest(BaseModel):
    no_telp: str = Field(..., min_length=1)
    kata_sandi: str = Field(..., min_length=1)

class RegisterResponse(UserResponse):
    toko: Optional[TokoResponse] = None

class LoginResponse(UserProfile):
    token: str
