from pydantic import BaseModel, Field
from typing import List, Optional

from .common import Pagination

class CategoryCreate(BaseModel):
    nama_category: str = Field(..., min_length=1)

class CategoryUpdate(BaseModel):
    nama_category: Optional[str] = None

class CategoryResponse(BaseModel):
    id: int
    nama_category: str

class CategoryList(BaseModel):
    categories: List[CategoryResponse]
    pagination: Pagination
