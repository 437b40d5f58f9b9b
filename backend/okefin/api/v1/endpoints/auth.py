from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from okefin import schemas
from okefin.services import auth_service
from okefin.api import deps

router = APIRouter()

@router.post("/register", response_model=schemas.APIResponse[schemas.RegisterResponse])
def register(register_in: schemas.RegisterRequest, db: Session = Depends(deps.get_db)):
    user = auth_service.register(db, register_in)
    return schemas.APIResponse(message="Register succeed", data=user)

@router.post("/login", response_model=schemas.APIResponse[schemas.LoginResponse])
def login(login_in: schemas.LoginRequest, db: Session = Depends(deps.get_db)):
    result = auth_service.login(db, login_in)
    return schemas.APIResponse(message="Login succeed", data=result)
