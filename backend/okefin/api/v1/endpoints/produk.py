from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from okefin import schemas
from okefin.services import produk_service
from okefin.api import deps

router = APIRouter()

@router.post("", status_code=201, response_model=schemas.APIResponse[schemas.ProdukResponse], include_in_schema=False)
@router.post("/", status_code=201, response_model=schemas.APIResponse[schemas.ProdukResponse])
def create_produk(
    produk_in: schemas.ProdukCreate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    """
    Create a produk in the caller's toko.
    """
    produk = produk_service.create(db, current_user.id, produk_in)
    return schemas.APIResponse(message="Produk created successfully", data=produk)

@router.get("", response_model=schemas.APIResponse[schemas.ProdukList], include_in_schema=False)
@router.get("/", response_model=schemas.APIResponse[schemas.ProdukList])
def read_my_produk(
    db: Session = Depends(deps.get_db),
    pagination: deps.PaginationParams = Depends(deps.get_pagination),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    """
    List the produk of the caller's toko.
    """
    produk = produk_service.get_by_user_toko(db, current_user.id, page=pagination.page, limit=pagination.limit)
    return schemas.APIResponse(message="Produk list retrieved successfully", data=produk)

@router.get("/{produk_id}", response_model=schemas.APIResponse[schemas.ProdukResponse])
def read_produk(
    produk_id: int,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    produk = produk_service.get(db, produk_id, current_user.id)
    return schemas.APIResponse(message="Produk retrieved successfully", data=produk)

@router.put("/{produk_id}", response_model=schemas.APIResponse[schemas.ProdukResponse])
def update_produk(
    produk_id: int,
    produk_in: schemas.ProdukUpdate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    """
    Partial update. A non-empty url_fotos replaces every existing photo.
    """
    produk = produk_service.update(db, produk_id, current_user.id, produk_in)
    return schemas.APIResponse(message="Produk updated successfully", data=produk)

@router.delete("/{produk_id}", response_model=schemas.APIResponse[None])
def delete_produk(
    produk_id: int,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    produk_service.delete(db, produk_id, current_user.id)
    return schemas.APIResponse(message="Produk deleted successfully")
