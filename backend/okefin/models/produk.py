from sqlalchemy import Column, Integer, String, ForeignKey, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from okefin.models.base import Base

class Produk(Base):
    __tablename__ = "produk"

    produk_id = Column(Integer, primary_key=True, index=True)
    nama_produk = Column(String(255), nullable=False)
    slug = Column(String(255), index=True)
    harga_reseller = Column(String(255))
    harga_konsumen = Column(String(255))
    stok = Column(Integer, nullable=False, default=0)
    deskripsi = Column(Text)
    toko_id = Column(Integer, ForeignKey("toko.toko_id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("category.category_id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    toko = relationship("Toko", back_populates="produk")
    category = relationship("Category", backref="produk")
    foto = relationship("FotoProduk", back_populates="produk", order_by="FotoProduk.foto_id")


class FotoProduk(Base):
    __tablename__ = "foto_produk"

    foto_id = Column(Integer, primary_key=True, index=True)
    produk_id = Column(Integer, ForeignKey("produk.produk_id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String(255), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    produk = relationship("Produk", back_populates="foto")
