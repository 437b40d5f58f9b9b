from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from okefin import schemas
from okefin.services import category_service
from okefin.api import deps

# Every category route is admin only
router = APIRouter(dependencies=[Depends(deps.require_admin)])

@router.post("", status_code=201, response_model=schemas.APIResponse[schemas.CategoryResponse], include_in_schema=False)
@router.post("/", status_code=201, response_model=schemas.APIResponse[schemas.CategoryResponse])
def create_category(category_in: schemas.CategoryCreate, db: Session = Depends(deps.get_db)):
    category = category_service.create(db, category_in)
    return schemas.APIResponse(message="Category created successfully", data=category)

@router.get("", response_model=schemas.APIResponse[schemas.CategoryList], include_in_schema=False)
@router.get("/", response_model=schemas.APIResponse[schemas.CategoryList])
def read_categories(
    db: Session = Depends(deps.get_db),
    pagination: deps.PaginationParams = Depends(deps.get_pagination)
):
    categories = category_service.get_all(db, page=pagination.page, limit=pagination.limit)
    return schemas.APIResponse(message="Categories retrieved successfully", data=categories)

@router.get("/{category_id}", response_model=schemas.APIResponse[schemas.CategoryResponse])
def read_category(category_id: int, db: Session = Depends(deps.get_db)):
    category = category_service.get(db, category_id)
    return schemas.APIResponse(message="Category retrieved successfully", data=category)

@router.put("/{category_id}", response_model=schemas.APIResponse[schemas.CategoryResponse])
def update_category(category_id: int, category_in: schemas.CategoryUpdate, db: Session = Depends(deps.get_db)):
    category = category_service.update(db, category_id, category_in)
    return schemas.APIResponse(message="Category updated successfully", data=category)

@router.delete("/{category_id}", response_model=schemas.APIResponse[None])
def delete_category(category_id: int, db: Session = Depends(deps.get_db)):
    category_service.delete(db, category_id)
    return schemas.APIResponse(message="Category deleted successfully")
