from .wilayah_service import WilayahService, wilayah_service
from .user_service import UserService, user_service
from .toko_service import TokoService, toko_service
from .auth_service import AuthService, auth_service
from .alamat_service import AlamatService, alamat_service
from .category_service import CategoryService, category_service
from .produk_service import ProdukService, produk_service
from .trx_service import TrxService, trx_service
from .upload_service import UploadService, upload_service

__all__ = [
    "WilayahService", "wilayah_service",
    "UserService", "user_service",
    "TokoService", "toko_service",
    "AuthService", "auth_service",
    "AlamatService", "alamat_service",
    "CategoryService", "category_service",
    "ProdukService", "produk_service",
    "TrxService", "trx_service",
    "UploadService", "upload_service",
]
