from fastapi import APIRouter, Depends

from justmyluck.features.signup.dependencies.signup import get_signup_service
from justmyluck.features.signup.schemas.subscribe import SubscribeIn
from justmyluck.features.signup.services.signup import SignupService
from justmyluck.platform.response import api_response

router = APIRouter(prefix="/api", tags=["Signup"])


@router.post("/subscribe")
async def subscribe(
    payload: SubscribeIn,
    service: SignupService = Depends(get_signup_service),
):
    # ValidationError and StorageError are rendered by the app's exception handlers
    result = await service.submit_signup(payload.email, payload.source)
    return api_response(result=result.response_status)
