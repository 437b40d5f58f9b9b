from fastapi import APIRouter
from okefin.api.v1.endpoints import auth, users, alamat, toko, category, produk, trx, upload

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/user", tags=["user"])
api_router.include_router(alamat.router, prefix="/alamat", tags=["alamat"])
api_router.include_router(toko.router, prefix="/toko", tags=["toko"])
api_router.include_router(category.router, prefix="/category", tags=["category"])
api_router.include_router(produk.router, prefix="/produk", tags=["produk"])
api_router.include_router(trx.router, prefix="/trx", tags=["trx"])
api_router.include_router(upload.router, prefix="/upload", tags=["upload"])
