"""
FastAPI dependencies: the bearer-token gatekeeper and service factories.
"""
import logging
from typing import Optional

import jwt
from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session

from .auth import Identity
from .db import get_db
from .services import AccountService, MessagingService, SocialGraphService

logger = logging.getLogger(__name__)


def get_current_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> Identity:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    token = authorization.split(" ", 1)[1].strip()
    try:
        return request.app.state.token_issuer.decode(token)
    except jwt.PyJWTError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc


def get_account_service(request: Request, db: Session = Depends(get_db)) -> AccountService:
    return AccountService(db, request.app.state.token_issuer)


def get_social_graph_service(db: Session = Depends(get_db)) -> SocialGraphService:
    return SocialGraphService(db)


def get_messaging_service(db: Session = Depends(get_db)) -> MessagingService:
    return MessagingService(db)
