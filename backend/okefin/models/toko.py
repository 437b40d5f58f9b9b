from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from okefin.models.base import Base

class Toko(Base):
    __tablename__ = "toko"

    toko_id = Column(Integer, primary_key=True, index=True)
    # One store per user is the convention, the lookup takes the first row
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    nama_toko = Column(String(255))
    url_foto = Column(String(255))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="toko")
    produk = relationship("Produk", back_populates="toko")
