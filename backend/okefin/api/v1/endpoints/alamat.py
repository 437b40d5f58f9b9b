from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from okefin import schemas
from okefin.services import alamat_service
from okefin.api import deps

router = APIRouter()

@router.post("", status_code=201, response_model=schemas.APIResponse[schemas.AlamatResponse], include_in_schema=False)
@router.post("/", status_code=201, response_model=schemas.APIResponse[schemas.AlamatResponse])
def create_alamat(
    alamat_in: schemas.AlamatCreate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    alamat = alamat_service.create(db, current_user.id, alamat_in)
    return schemas.APIResponse(message="Alamat created successfully", data=alamat)

@router.get("", response_model=schemas.APIResponse[schemas.AlamatList], include_in_schema=False)
@router.get("/", response_model=schemas.APIResponse[schemas.AlamatList])
@router.get("/my", response_model=schemas.APIResponse[schemas.AlamatList])
def read_my_alamat(
    db: Session = Depends(deps.get_db),
    pagination: deps.PaginationParams = Depends(deps.get_pagination),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    alamat = alamat_service.get_by_user(db, current_user.id, page=pagination.page, limit=pagination.limit)
    return schemas.APIResponse(message="Alamat list retrieved successfully", data=alamat)

@router.get("/{alamat_id}", response_model=schemas.APIResponse[schemas.AlamatResponse])
def read_alamat(
    alamat_id: int,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    alamat = alamat_service.get(db, alamat_id, current_user.id)
    return schemas.APIResponse(message="Alamat retrieved successfully", data=alamat)

@router.put("/{alamat_id}", response_model=schemas.APIResponse[schemas.AlamatResponse])
def update_alamat(
    alamat_id: int,
    alamat_in: schemas.AlamatUpdate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    alamat = alamat_service.update(db, alamat_id, current_user.id, alamat_in)
    return schemas.APIResponse(message="Alamat updated successfully", data=alamat)

@router.delete("/{alamat_id}", response_model=schemas.APIResponse[None])
def delete_alamat(
    alamat_id: int,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    alamat_service.delete(db, alamat_id, current_user.id)
    return schemas.APIResponse(message="Alamat deleted successfully")
