# app/routes/auth.py
from __future__ import annotations

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.auth.identity import Identity
from app.core.database import get_db
from app.core.security import TokenConfig
from app.dependencies.auth import get_token_config, require_identity
from app.schemas.auth import AuthOut, LoginIn, RegisterIn
from app.schemas.user import PublicUserOut, UserMeOut
from app.services.identity import authenticate_user, get_profile, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterIn = Body(default_factory=RegisterIn),
    db: Session = Depends(get_db),
    token_config: TokenConfig = Depends(get_token_config),
):
    result = register_user(
        db,
        token_config,
        email=payload.email,
        password=payload.password,
        name=payload.name,
        role=payload.role,
        phone=payload.phone,
        company_name=payload.company_name,
        skills=payload.skills,
    )
    return AuthOut(token=result.token, user=PublicUserOut.model_validate(result.user))


@router.post("/login", response_model=AuthOut)
def login(
    payload: LoginIn = Body(default_factory=LoginIn),
    db: Session = Depends(get_db),
    token_config: TokenConfig = Depends(get_token_config),
):
    result = authenticate_user(db, token_config, email=payload.email, password=payload.password)
    return AuthOut(token=result.token, user=PublicUserOut.model_validate(result.user))


@router.get("/me", response_model=UserMeOut)
def me(identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    return get_profile(db, identity.user_id)
