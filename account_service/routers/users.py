import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from account_service.dependencies import get_credential_store
from account_service.schemas.auth import UserRecordResponse
from account_service.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(store: CredentialStore = Depends(get_credential_store)):
    # Administrative listing: no filtering, paging or access control.
    # Password hashes are left out of the response.
    try:
        records = await store.list_all()
        return [UserRecordResponse.model_validate(r).model_dump() for r in records]
    except Exception:
        logger.exception("Error fetching users")
        return JSONResponse(status_code=500, content={"message": "Server error"})
