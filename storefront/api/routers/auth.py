# storefront/api/routers/auth.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_store
from storefront.domain.schemas import LoginIn, RegisterIn, User
from storefront.services.store_service import StoreService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=User)
def login(payload: LoginIn, store: StoreService = Depends(get_store)):
    try:
        return store.login(payload.email, payload.password)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/register", response_model=User, status_code=201)
def register(payload: RegisterIn, store: StoreService = Depends(get_store)):
    try:
        return store.register(payload.email, payload.password, payload.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/logout", status_code=204)
def logout(store: StoreService = Depends(get_store)):
    store.logout()


@router.get("/me", response_model=Optional[User])
def me(store: StoreService = Depends(get_store)):
    return store.current_user
