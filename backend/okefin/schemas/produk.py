from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from .common import Pagination

class ProdukCreate(BaseModel):
    nama_produk: str = Field(..., min_length=1)
    harga: float = Field(..., gt=0)
    stok: int = Field(..., gt=0)
    id_category: int = Field(..., gt=0)
    url_fotos: List[str] = Field(..., min_length=1)
    deskripsi: str = Field(..., min_length=1)

class ProdukUpdate(BaseModel):
    """Zero, empty and missing values leave the stored field untouched."""

    nama_produk: Optional[str] = None
    harga: Optional[float] = None
    stok: Optional[int] = None
    id_category: Optional[int] = None
    url_fotos: Optional[List[str]] = None
    deskripsi: Optional[str] = None

class ProdukResponse(BaseModel):
    id: int
    nama_produk: str
    slug: str
    harga: float
    stok: int
    id_category: int
    url_fotos: List[str]
    deskripsi: Optional[str] = None
    toko_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class ProdukList(BaseModel):
    produk: List[ProdukResponse]
    pagination: Pagination
