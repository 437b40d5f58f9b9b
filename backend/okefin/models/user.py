from sqlalchemy import Boolean, Column, Date, Integer, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from okefin.models.base import Base

class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True)
    nama = Column(String(255), nullable=False)
    kata_sandi = Column(String(255), nullable=False)
    no_telp = Column(String(255), unique=True, index=True, nullable=False)
    tanggal_lahir = Column(Date)
    jenis_kelamin = Column(String(255))
    tentang = Column(Text)
    pekerjaan = Column(String(255))
    email = Column(String(255), unique=True, index=True, nullable=False)
    id_provinsi = Column(String(255))
    id_kota = Column(String(255))
    is_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    alamat = relationship("Alamat", back_populates="user")
    toko = relationship("Toko", back_populates="user")
    trx = relationship("Trx", back_populates="user")
