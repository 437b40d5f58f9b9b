from fastapi import APIRouter, Depends, File, UploadFile
from okefin import schemas
from okefin.services import upload_service
from okefin.api import deps

router = APIRouter()

@router.post("", response_model=schemas.APIResponse[schemas.UploadResponse])
def upload_file(
    file: UploadFile = File(...),
    current_user: deps.CurrentUser = Depends(deps.get_current_user)
):
    uploaded = upload_service.save(file)
    return schemas.APIResponse(message="File uploaded successfully", data=uploaded)
