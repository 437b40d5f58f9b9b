from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from okefin import schemas
from okefin.services import trx_service
from okefin.api import deps

router = APIRouter()

@router.post("", status_code=201, response_model=schemas.APIResponse[schemas.TrxResponse], include_in_schema=False)
@router.post("/", status_code=201, response_model=schemas.APIResponse[schemas.TrxResponse])
def create_trx(
    trx_in: schemas.TrxCreate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    """
    Place an order. Fails as a whole if the total does not add up or any line is out of stock.
    """
    trx = trx_service.create(db, current_user.id, trx_in)
    return schemas.APIResponse(message="Transaksi created successfully", data=trx)

@router.get("", response_model=schemas.APIResponse[schemas.TrxList], include_in_schema=False)
@router.get("/", response_model=schemas.APIResponse[schemas.TrxList])
def read_my_trx(
    db: Session = Depends(deps.get_db),
    pagination: deps.PaginationParams = Depends(deps.get_pagination),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    trx = trx_service.get_by_user(db, current_user.id, page=pagination.page, limit=pagination.limit)
    return schemas.APIResponse(message="Transaksi list retrieved successfully", data=trx)

@router.get("/{trx_id}", response_model=schemas.APIResponse[schemas.TrxResponse])
def read_trx(
    trx_id: int,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    trx = trx_service.get(db, trx_id, current_user.id)
    return schemas.APIResponse(message="Transaksi retrieved successfully", data=trx)

@router.put("/{trx_id}", response_model=schemas.APIResponse[schemas.TrxResponse])
def update_trx(
    trx_id: int,
    trx_in: schemas.TrxUpdate,
    db: Session = Depends(deps.get_db),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    trx = trx_service.update_status(db, trx_id, current_user.id, trx_in)
    return schemas.APIResponse(message="Transaksi updated successfully", data=trx)
