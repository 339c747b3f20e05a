from fastapi import APIRouter, Depends

from account_service.dependencies import get_authentication_flow, get_registration_flow
from account_service.schemas.auth import LoginRequest, SignupRequest
from account_service.services.accounts import AuthenticationFlow, RegistrationFlow
from account_service.utils.response import success_response

router = APIRouter(tags=["auth"])


@router.post("/signup", status_code=201)
async def signup(request: SignupRequest, flow: RegistrationFlow = Depends(get_registration_flow)):
    identity = await flow.register(request.username, request.email, request.password)
    return success_response(
        data=identity.model_dump(),
        message=f"User with the {identity.email} registered successfully!",
    )


@router.post("/login", status_code=201)
async def login(request: LoginRequest, flow: AuthenticationFlow = Depends(get_authentication_flow)):
    identity = await flow.authenticate(request.email, request.password)
    return success_response(
        data=identity.model_dump(),
        message=f"User with the {identity.email} logged in successfully!",
    )
