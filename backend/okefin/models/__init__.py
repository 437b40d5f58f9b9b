from .base import Base
from .user import User
from .alamat import Alamat
from .toko import Toko
from .category import Category
from .produk import Produk, FotoProduk
from .log_produk import LogProduk
from .trx import Trx, DetailTrx

__all__ = [
    "Base",
    "User",
    "Alamat",
    "Toko",
    "Category",
    "Produk",
    "FotoProduk",
    "LogProduk",
    "Trx",
    "DetailTrx",
]
