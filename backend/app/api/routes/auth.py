"""
Authentication routes for sign-up and sign-in.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.user import UserCreate, UserLogin, Token, UserResponse
from app.core.security import create_access_token
from app.services.notification_service import BackgroundWelcomeNotifier
from app.services.user_service import register_user, authenticate_user
from app.api.dependencies import get_background_notifier

router = APIRouter(prefix="/users", tags=["auth"])


@router.post("/sign_up", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    notifier: BackgroundWelcomeNotifier = Depends(get_background_notifier)
):
    """Register a new user. The welcome message is sent after the response."""
    return register_user(user_data, db, notifier)


@router.get("/sign_in")
async def sign_in_page():
    """Landing point for requests that need a signed-in user."""
    return {"message": "You need to sign in or sign up before continuing."}


@router.post("/sign_in", response_model=Token)
async def sign_in(credentials: UserLogin, db: Session = Depends(get_db)):
    """Sign in and get a JWT token."""
    user = authenticate_user(credentials.email, credentials.password, db)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    
    access_token = create_access_token(data={"sub": user.email, "user_id": user.id})
    return {"access_token": access_token, "token_type": "bearer"}
