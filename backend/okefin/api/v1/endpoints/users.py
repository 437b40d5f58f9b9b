from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from okefin import schemas
from okefin.services import user_service
from okefin.api import deps

router = APIRouter()

@router.get("/my", response_model=schemas.APIResponse[schemas.UserResponse])
def read_my_profile(
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    profile = user_service.get_profile(db, current_user.id)
    return schemas.APIResponse(message="Profile retrieved successfully", data=profile)

@router.put("/my", response_model=schemas.APIResponse[schemas.UserResponse])
def update_my_profile(
    user_in: schemas.UserUpdate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    profile = user_service.update_profile(db, current_user.id, user_in)
    return schemas.APIResponse(message="Profile updated successfully", data=profile)

@router.get("", response_model=schemas.APIResponse[schemas.UserList], include_in_schema=False)
@router.get("/", response_model=schemas.APIResponse[schemas.UserList])
def read_users(
    db: Session = Depends(deps.get_db),
    pagination: deps.PaginationParams = Depends(deps.get_pagination),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    users = user_service.get_all(db, page=pagination.page, limit=pagination.limit)
    return schemas.APIResponse(message="Users retrieved successfully", data=users)

@router.get("/{user_id}", response_model=schemas.APIResponse[schemas.UserResponse])
def read_user(
    user_id: int,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    profile = user_service.get_profile(db, user_id)
    return schemas.APIResponse(message="User retrieved successfully", data=profile)
