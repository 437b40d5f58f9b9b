from .user_repository import UserRepository, user_repository
from .alamat_repository import AlamatRepository, alamat_repository
from .toko_repository import TokoRepository, toko_repository
from .category_repository import CategoryRepository, category_repository
from .produk_repository import ProdukRepository, produk_repository
from .foto_produk_repository import FotoProdukRepository, foto_produk_repository
from .trx_repository import TrxRepository, trx_repository

__all__ = [
    "UserRepository", "user_repository",
    "AlamatRepository", "alamat_repository",
    "TokoRepository", "toko_repository",
    "CategoryRepository", "category_repository",
    "ProdukRepository", "produk_repository",
    "FotoProdukRepository", "foto_produk_repository",
    "TrxRepository", "trx_repository",
]
