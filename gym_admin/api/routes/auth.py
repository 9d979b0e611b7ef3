# =======================================================================================
# gym_admin/api/routes/auth.py - Administrator Login Endpoints
# =======================================================================================


from fastapi import APIRouter, Depends, HTTPException, status
from ...models.schemas import LoginRequest, LoginResponse
from ...runtime import AdminRuntime
from ...utils.exceptions import RequestError
from ..dependencies import get_runtime

router = APIRouter()


@router.post("/auth/login", response_model=LoginResponse)
async def login(request: LoginRequest, runtime: AdminRuntime = Depends(get_runtime)):
    try:
        session = await runtime.login(request.email, request.password)
    except RequestError as e:
        if e.status_code in (400, 401, 403, 404):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            )
        raise

    return LoginResponse(user=session.user, message=f"Welcome, {session.first_name}")


@router.post("/auth/logout")
async def logout(runtime: AdminRuntime = Depends(get_runtime)):
    await runtime.logout()
    return {"message": "Signed out"}
