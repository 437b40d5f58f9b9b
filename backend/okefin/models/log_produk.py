from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from okefin.models.base import Base

class LogProduk(Base):
    """Immutable copy of a produk row, referenced by order lines."""

    __tablename__ = "log_produk"

    log_produk_id = Column(Integer, primary_key=True, index=True)
    # No foreign keys: snapshots outlive the produk, toko and category they copy
    produk_id = Column(Integer, nullable=False, index=True)
    nama_produk = Column(String(255))
    slug = Column(String(255))
    harga_reseller = Column(String(255))
    harga_konsumen = Column(String(255))
    deskripsi = Column(Text)
    toko_id = Column(Integer, nullable=False)
    category_id = Column(Integer, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    @classmethod
    def from_produk(cls, produk) -> "LogProduk":
        return cls(
            produk_id=produk.produk_id,
            nama_produk=produk.nama_produk,
            slug=produk.slug,
            harga_reseller=produk.harga_reseller,
            harga_konsumen=produk.harga_konsumen,
            deskripsi=produk.deskripsi,
            toko_id=produk.toko_id,
            category_id=produk.category_id,
        )
