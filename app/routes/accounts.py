from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas import AccountRead
from app.services import build_account_service

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.get("", response_model=List[AccountRead])
async def list_accounts(db: Session = Depends(get_db)):
    return build_account_service(db).get_accounts()


@router.get("/{account_id}", response_model=AccountRead)
async def get_account(account_id: int, db: Session = Depends(get_db)):
    account = build_account_service(db).get_account(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    return account
