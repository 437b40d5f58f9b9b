from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from .common import Pagination
from .enums import TrxStatusEnum

class DetailTrxRequest(BaseModel):
    produk_id: int = Field(..., gt=0)
    jumlah: int = Field(..., gt=0)
    harga: float = Field(..., gt=0)

class TrxCreate(BaseModel):
    alamat_id: int = Field(..., gt=0)
    total_harga: float = Field(..., gt=0)
    details: List[DetailTrxRequest] = Field(..., min_length=1)

class TrxUpdate(BaseModel):
    status: TrxStatusEnum

class DetailTrxResponse(BaseModel):
    id: int
    produk_id: int
    nama_produk: Optional[str] = None
    toko_id: int
    jumlah: int
    harga: float
    harga_total: float

class TrxResponse(BaseModel):
    id: int
    kode_invoice: str
    alamat_id: int
    user_id: int
    total_harga: float
    status: TrxStatusEnum
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    details: List[DetailTrxResponse]

class TrxList(BaseModel):
    transaksi: List[TrxResponse]
    pagination: Pagination
