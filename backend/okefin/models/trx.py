from sqlalchemy import Column, Float, Integer, String, ForeignKey, TIMESTAMP, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from okefin.models.base import Base
from okefin.schemas.enums import TrxStatusEnum

class Trx(Base):
    __tablename__ = "trx"

    trx_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    alamat_pengiriman = Column(Integer, ForeignKey("alamat.alamat_id"), nullable=False)
    harga_total = Column(Float, nullable=False)
    kode_invoice = Column(String(255), unique=True, nullable=False)
    status = Column(Enum(TrxStatusEnum), nullable=False, default=TrxStatusEnum.pending)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="trx")
    alamat = relationship("Alamat")
    details = relationship("DetailTrx", back_populates="trx", order_by="DetailTrx.detail_trx_id")


class DetailTrx(Base):
    __tablename__ = "detail_trx"

    detail_trx_id = Column(Integer, primary_key=True, index=True)
    trx_id = Column(Integer, ForeignKey("trx.trx_id", ondelete="CASCADE"), nullable=False, index=True)
    log_produk_id = Column(Integer, ForeignKey("log_produk.log_produk_id"), nullable=False)
    toko_id = Column(Integer, nullable=False)
    kuantitas = Column(Integer, nullable=False)
    harga_total = Column(Float, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    trx = relationship("Trx", back_populates="details")
    log_produk = relationship("LogProduk")
