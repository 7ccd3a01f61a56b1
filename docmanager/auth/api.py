# docmanager/auth/api.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from docmanager.shared.db import get_db
from docmanager.shared.config import Settings, get_settings
from docmanager.auth.schemas import RegisterIn, LoginIn, AuthOut
from docmanager.auth.service import register_user, authenticate_user

router = APIRouter(tags=["Auth"])

@router.post("/register", response_model=AuthOut, status_code=201)
def api_register(
    inb: RegisterIn | None = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = register_user(db, inb or RegisterIn(), rounds=settings.BCRYPT_ROUNDS)
    return {"message": "User registered successfully", "user": user}

@router.post("/login", response_model=AuthOut)
def api_login(inb: LoginIn | None = None, db: Session = Depends(get_db)):
    # identity confirmation only: no session or token is issued
    user = authenticate_user(db, inb or LoginIn())
    return {"message": "Login successful", "user": user}
