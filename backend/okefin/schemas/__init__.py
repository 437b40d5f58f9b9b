# okefin/schemas/__init__.py

from .enums import TrxStatusEnum
from .common import APIResponse, ErrorResponse, Pagination
from .wilayah import ProvinsiResponse, KotaResponse
from .user import UserUpdate, UserProfile, UserResponse, UserList
from .toko import TokoCreate, TokoUpdate, TokoResponse, TokoList
from .auth import RegisterRequest, RegisterResponse, LoginRequest, LoginResponse
from .alamat import AlamatCreate, AlamatUpdate, AlamatResponse, AlamatList
from .category import CategoryCreate, CategoryUpdate, CategoryResponse, CategoryList
from .produk import ProdukCreate, ProdukUpdate, ProdukResponse, ProdukList
from .trx import (
    DetailTrxRequest,
    DetailTrxResponse,
    TrxCreate,
    TrxUpdate,
    TrxResponse,
    TrxList
)
from .upload import UploadResponse

__all__ = [
    "TrxStatusEnum",
    "APIResponse", "ErrorResponse", "Pagination",
    "ProvinsiResponse", "KotaResponse",
    "UserUpdate", "UserProfile", "UserResponse", "UserList",
    "TokoCreate", "TokoUpdate", "TokoResponse", "TokoList",
    "RegisterRequest", "RegisterResponse", "LoginRequest", "LoginResponse",
    "AlamatCreate", "AlamatUpdate", "AlamatResponse", "AlamatList",
    "CategoryCreate", "CategoryUpdate", "CategoryResponse", "CategoryList",
    "ProdukCreate", "ProdukUpdate", "ProdukResponse", "ProdukList",
    "DetailTrxRequest", "DetailTrxResponse", "TrxCreate", "TrxUpdate", "TrxResponse", "TrxList",
    "UploadResponse"
]
