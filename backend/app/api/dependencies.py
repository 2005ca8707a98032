import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from .. import crud, models
from ..auth.context import AdminPolicy, AuthContext
from ..core.config import settings
from ..crud import crud_assessment, crud_client
from ..database import get_db
from ..utils import AssessmentNotFound, error_response

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def decode_token(token: str) -> dict:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> AuthContext:
    """Verify the bearer token and map its claims to an ``AuthContext``.

    The ``org_id`` claim carries the identity provider's organization id; it
    is resolved to the local ``Organization`` here so handlers only ever see
    internal ids.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None or not credentials.credentials:
        raise credentials_exception
    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise credentials_exception
    principal_id = payload.get("sub")
    if not principal_id:
        raise credentials_exception

    org_id: Optional[int] = None
    external_org_id = payload.get("org_id")
    if external_org_id:
        org = crud.organization.get_by_external_id(db, str(external_org_id))
        if org is None:
            logger.info("Token org %s has no local organization", external_org_id)
        else:
            org_id = org.id

    return AuthContext(
        principal_id=str(principal_id),
        org_id=org_id,
        org_role=payload.get("org_role"),
    )


def require_active_org(ctx: AuthContext = Depends(get_auth_context)) -> AuthContext:
    if not ctx.has_active_org:
        logger.warning("Principal %s has no active organization", ctx.principal_id)
        raise error_response(
            "No active organization",
            {"org_id": "required"},
            status.HTTP_403_FORBIDDEN,
        )
    return ctx


def get_admin_policy() -> AdminPolicy:
    return AdminPolicy(admin_user_id=settings.ADMIN_USER_ID or None)


def require_admin(
    ctx: AuthContext = Depends(get_auth_context),
    policy: AdminPolicy = Depends(get_admin_policy),
) -> AuthContext:
    if not policy.configured:
        logger.error("ADMIN_USER_ID is not configured")
        raise error_response(
            "Server misconfiguration",
            {"admin": "not_configured"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    if not policy.is_admin(ctx):
        logger.warning("Principal %s denied admin access", ctx.principal_id)
        raise error_response("Forbidden", {"admin": "forbidden"}, status.HTTP_403_FORBIDDEN)
    return ctx


def ensure_same_org(ctx: AuthContext, org_id: int) -> None:
    if ctx.org_id != org_id:
        logger.warning(
            "Principal %s (org %s) denied access to org %s",
            ctx.principal_id,
            ctx.org_id,
            org_id,
        )
        raise error_response("Forbidden", {"org_id": "forbidden"}, status.HTTP_403_FORBIDDEN)


def get_org_client(
    client_id: int,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
) -> models.Client:
    """Client of the caller's organization; foreign clients look missing."""
    db_client = crud_client.get_client(db, client_id)
    if db_client is None or db_client.org_id != ctx.org_id:
        raise error_response(
            "Client not found",
            {"client_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return db_client


def get_org_assessment(
    assessment_id: int,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
) -> models.Assessment:
    db_assessment = crud_assessment.get_assessment(db, assessment_id)
    if db_assessment is None:
        raise AssessmentNotFound("Assessment not found").to_http()
    ensure_same_org(ctx, db_assessment.org_id)
    return db_assessment
