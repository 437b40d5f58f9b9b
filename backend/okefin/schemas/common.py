from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar

from okefin.core.exceptions import ErrorKind

DataT = TypeVar("DataT")

class APIResponse(BaseModel, Generic[DataT]):
    status: bool = True
    message: str
    errors: Optional[List[str]] = None
    data: Optional[DataT] = None

class ErrorResponse(BaseModel):
    status: bool = False
    message: str
    kind: ErrorKind
    errors: List[str]
    data: None = None

class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    limit: int
