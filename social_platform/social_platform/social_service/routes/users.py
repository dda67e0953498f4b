"""
User routes: accounts, follow relationships, messages and the leaderboard.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from ..auth import Identity
from ..dependencies import (
    get_account_service,
    get_current_identity,
    get_messaging_service,
    get_social_graph_service,
)
from ..schemas import (
    ErrorResponse,
    LoginRequest,
    MessageCreate,
    MessageResponse,
    PasswordUpdateRequest,
    RankedUser,
    SignupRequest,
    TokenResponse,
    UserProfile,
)
from ..services import AccountService, MessagingService, SocialGraphService

router = APIRouter(tags=["users"])

_errors = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=MessageResponse, responses=_errors)
def signup(payload: SignupRequest, accounts: AccountService = Depends(get_account_service)):
    accounts.signup(payload.username, payload.password)
    return MessageResponse(message="User created")


@router.post("/login", response_model=TokenResponse, responses=_errors)
def login(payload: LoginRequest, accounts: AccountService = Depends(get_account_service)):
    token = accounts.login(payload.username, payload.password)
    return TokenResponse(token=token)


@router.get("/me", response_model=UserProfile, responses=_errors)
def me(
    identity: Identity = Depends(get_current_identity),
    accounts: AccountService = Depends(get_account_service),
):
    return accounts.me(identity)


@router.put("/me/update-password", response_model=MessageResponse, responses=_errors)
def update_password(
    payload: PasswordUpdateRequest,
    identity: Identity = Depends(get_current_identity),
    accounts: AccountService = Depends(get_account_service),
):
    accounts.update_password(identity, payload.password)
    return MessageResponse(message="Password updated")


@router.get("/user/{user_id}", response_model=UserProfile, responses=_errors)
def get_user(user_id: int, accounts: AccountService = Depends(get_account_service)):
    return accounts.get_user(user_id)


@router.post("/user/{user_id}/follow", response_model=MessageResponse, responses=_errors)
def follow_user(
    user_id: int,
    identity: Identity = Depends(get_current_identity),
    graph: SocialGraphService = Depends(get_social_graph_service),
):
    graph.follow_user(identity, user_id)
    return MessageResponse(message="User followed")


@router.delete("/user/{user_id}/unfollow", response_model=MessageResponse, responses=_errors)
def unfollow_user(
    user_id: int,
    identity: Identity = Depends(get_current_identity),
    graph: SocialGraphService = Depends(get_social_graph_service),
):
    graph.unfollow_user(identity, user_id)
    return MessageResponse(message="User unfollowed")


@router.post("/user/{user_id}/create-message", response_model=MessageResponse, responses=_errors)
def create_message(
    user_id: int,
    payload: MessageCreate,
    identity: Identity = Depends(get_current_identity),
    messaging: MessagingService = Depends(get_messaging_service),
):
    messaging.create_message(identity, user_id, payload.message)
    return MessageResponse(message="Message sent")


@router.get("/most-followed", response_model=List[RankedUser], responses=_errors)
def most_followed(graph: SocialGraphService = Depends(get_social_graph_service)):
    return graph.most_followed()
