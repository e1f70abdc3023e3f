"""
HTTP API exposing the word filter and the account endpoints.

Provides ``create_app()`` which returns a FastAPI application:

- ``GET  /health``               -- liveness + corpus info
- ``POST /game/general-letters`` -- letter-constraint filter (bearer token)
- ``POST /users/register``       -- create an account
- ``POST /users/login``          -- exchange credentials for a token
- ``GET  /users/``               -- list accounts (bearer token)
- ``GET|PUT|DELETE /users/{id}`` -- read/update/delete one account (bearer token)
- ``POST /users/revoke_token``   -- revoke a live token this service signed (else 400)

Usage::

    from wordhint.service.app import create_app

    app = create_app()

    # Run with:  uvicorn --factory wordhint.service.app:create_app
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, Field

from wordhint import __version__
from wordhint.auth import AuthGate, TokenSigner, UserStore, bearer_token
from wordhint.corpus import WordCorpus, open_corpus
from wordhint.engine import build_request, filter_words
from wordhint.errors import (
    CorpusUnavailable,
    InvalidConstraint,
    InvalidToken,
    Unauthorized,
    UserExists,
    UserNotFound,
)
from .config import Settings

logger = logging.getLogger(__name__)


# -- Request/Response models --

class LettersRequest(BaseModel):
    # "correct"/"incorrect" are the field names older frontends send
    exact: str
    required: str = Field(default="", validation_alias=AliasChoices("required", "correct"))
    excluded: str = Field(default="", validation_alias=AliasChoices("excluded", "incorrect"))


class NewUser(BaseModel):
    username: str
    email: str
    password: str


class UserUpdate(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginCredentials(BaseModel):
    username: str
    password: str


class TokenBody(BaseModel):
    token: str


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    created_at: str
    updated_at: str


class TokenResponse(BaseModel):
    token: str


class HealthResponse(BaseModel):
    status: str
    version: str
    corpus: str
    words: int


def create_app(
    settings: Optional[Settings] = None,
    *,
    corpus: Optional[WordCorpus] = None,
    users: Optional[UserStore] = None,
    signer: Optional[TokenSigner] = None,
) -> FastAPI:
    """Create the FastAPI application.

    Parameters
    ----------
    settings:
        Service settings. Defaults to ``Settings.from_env()``.
    corpus:
        Pre-built word corpus. If ``None``, one is opened from
        ``settings.backend`` / ``settings.words``.
    users:
        Account store. A fresh in-memory store if ``None``.
    signer:
        Token signer. Built from ``settings.signing_secret()`` and
        ``settings.token_ttl`` if ``None``.
    """
    settings = settings or Settings.from_env()
    if corpus is None:
        corpus = open_corpus(settings.backend, settings.words, settings.sqlite_path)
    users = UserStore() if users is None else users
    signer = signer if signer is not None else TokenSigner(settings.signing_secret(), settings.token_ttl)
    gate = AuthGate(signer, users)

    api = FastAPI(
        title="wordhint API",
        description="Letter-constraint word filter for word-guessing games.",
        version=__version__,
    )
    api.state.settings = settings
    api.state.corpus = corpus
    api.state.users = users
    api.state.gate = gate

    # -- Error mapping --

    def _error(status: int):
        async def handler(request: Request, exc: Exception) -> JSONResponse:
            return JSONResponse(status_code=status, content={"detail": str(exc)})
        return handler

    api.add_exception_handler(Unauthorized, _error(401))
    api.add_exception_handler(InvalidConstraint, _error(400))
    api.add_exception_handler(UserNotFound, _error(404))
    api.add_exception_handler(UserExists, _error(409))
    api.add_exception_handler(InvalidToken, _error(400))
    api.add_exception_handler(CorpusUnavailable, _error(503))

    def require_bearer(authorization: Optional[str] = Header(default=None)) -> None:
        """Dependency: runs before body/path validation, so no token is always a 401."""
        gate.require(bearer_token(authorization))

    bearer = [Depends(require_bearer)]

    # -- Health --

    @api.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="ok", version=__version__,
                              corpus=getattr(corpus, "id", type(corpus).__name__),
                              words=len(corpus))

    # -- Game --

    @api.post("/game/general-letters", response_model=list[str], dependencies=bearer)
    def general_letters(body: LettersRequest) -> list[str]:
        """Return every corpus word matching the letter constraints."""
        request = build_request(body.exact, body.required, body.excluded)
        return filter_words(corpus, request, limit=settings.max_results)

    # -- Users --

    @api.post("/users/register", response_model=UserResponse, status_code=201)
    def register(body: NewUser) -> dict[str, Any]:
        try:
            user = users.create(body.username, body.email, body.password)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return user.public()

    @api.post("/users/login", response_model=TokenResponse)
    def login(body: LoginCredentials) -> TokenResponse:
        user_id = users.authenticate(body.username, body.password)
        if user_id is None:
            raise Unauthorized("Invalid credentials")
        return TokenResponse(token=signer.issue(user_id))

    @api.post("/users/revoke_token")
    def revoke_token(body: TokenBody) -> dict[str, str]:
        claims = signer.decode(body.token)
        users.revoke(body.token, claims["exp"])
        return {"status": "revoked"}

    @api.get("/users/", response_model=list[UserResponse], dependencies=bearer)
    def list_users() -> list[dict[str, Any]]:
        return [u.public() for u in users.list()]

    @api.get("/users/{user_id}", response_model=UserResponse, dependencies=bearer)
    def get_user(user_id: int) -> dict[str, Any]:
        return users.get(user_id).public()

    @api.put("/users/{user_id}", response_model=UserResponse, dependencies=bearer)
    def update_user(user_id: int, body: UserUpdate) -> dict[str, Any]:
        try:
            user = users.update(user_id, username=body.username, email=body.email,
                                password=body.password)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return user.public()

    @api.delete("/users/{user_id}", status_code=204, dependencies=bearer)
    def delete_user(user_id: int) -> Response:
        users.delete(user_id)
        return Response(status_code=204)

    logger.info("wordhint API ready: corpus=%s", getattr(corpus, "id", type(corpus).__name__))
    return api
