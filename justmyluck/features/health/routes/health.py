from fastapi import APIRouter, status

from justmyluck.platform.response import api_response

router = APIRouter()


@router.get("/", tags=["health"])
async def health_check():
    return api_response(status_code=status.HTTP_200_OK)
