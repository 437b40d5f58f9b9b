from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from okefin import schemas
from okefin.services import toko_service
from okefin.api import deps

router = APIRouter()

@router.post("", status_code=201, response_model=schemas.APIResponse[schemas.TokoResponse], include_in_schema=False)
@router.post("/", status_code=201, response_model=schemas.APIResponse[schemas.TokoResponse])
def create_toko(
    toko_in: schemas.TokoCreate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    toko = toko_service.create(db, current_user.id, toko_in)
    return schemas.APIResponse(message="Toko created successfully", data=toko)

@router.get("", response_model=schemas.APIResponse[schemas.TokoList], include_in_schema=False)
@router.get("/", response_model=schemas.APIResponse[schemas.TokoList])
def read_toko_list(
    db: Session = Depends(deps.get_db),
    pagination: deps.PaginationParams = Depends(deps.get_pagination),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    toko = toko_service.get_all(db, page=pagination.page, limit=pagination.limit)
    return schemas.APIResponse(message="Toko list retrieved successfully", data=toko)

@router.get("/my", response_model=schemas.APIResponse[schemas.TokoResponse])
def read_my_toko(
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    toko = toko_service.get_by_user(db, current_user.id)
    return schemas.APIResponse(message="Toko retrieved successfully", data=toko)

@router.get("/{toko_id}", response_model=schemas.APIResponse[schemas.TokoResponse])
def read_toko(
    toko_id: int,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    toko = toko_service.get(db, toko_id, current_user.id)
    return schemas.APIResponse(message="Toko retrieved successfully", data=toko)

@router.put("/{toko_id}", response_model=schemas.APIResponse[schemas.TokoResponse])
def update_toko(
    toko_id: int,
    toko_in: schemas.TokoUpdate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    toko = toko_service.update(db, toko_id, current_user.id, toko_in)
    return schemas.APIResponse(message="Toko updated successfully", data=toko)

@router.delete("/{toko_id}", response_model=schemas.APIResponse[None])
def delete_toko(
    toko_id: int,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    toko_service.delete(db, toko_id, current_user.id)
    return schemas.APIResponse(message="Toko deleted successfully")
