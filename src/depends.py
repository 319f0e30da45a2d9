from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.cryptography.bcrypt_adapter import BcryptAdapter
from src.adapter.cryptography.jwt_adapter import JwtAdapter
from src.adapter.cryptography.plaintext_adapter import PlaintextAdapter
from src.adapter.document_store.sql_collection import SqlDocumentCollection
from src.adapter.repositories.account_repository import AccountDocumentRepository
from src.api.controllers import LoginController, SignupController
from src.api.error import AccessDeniedError, ClientError, InternalServerError, ServerError
from src.api.protocols import Controller
from src.api.validation import (
    EmailValidatorAdapter,
    make_login_validation,
    make_signup_validation,
)
from src.app.errors import PersistenceError
from src.app.repositories.account_repository import IAccountRepository
from src.app.services.document_store import IDocumentCollection
from src.app.use_cases.account import AddAccountUseCase, LoadAccountByTokenUseCase
from src.app.use_cases.auth import AuthenticationService
from src.domain.entities import Account

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


def get_accounts_collection() -> IDocumentCollection:
    return SqlDocumentCollection(
        AsyncSessionLocal, ApplicationConfig.ACCOUNTS_COLLECTION, unique_field="email"
    )


def get_account_repository(
    collection: IDocumentCollection = Depends(get_accounts_collection),
) -> IAccountRepository:
    return AccountDocumentRepository(collection)


def get_jwt_adapter() -> JwtAdapter:
    return JwtAdapter(ApplicationConfig.JWT_SECRET, ApplicationConfig.JWT_ALGORITHM)


def get_password_hasher():
    """Hasher/comparer pair selected by PASSWORD_HASHER (plaintext or bcrypt)"""
    if ApplicationConfig.PASSWORD_HASHER == "bcrypt":
        return BcryptAdapter(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    if ApplicationConfig.PASSWORD_HASHER == "plaintext":
        return PlaintextAdapter()
    raise ValueError(f"Unknown PASSWORD_HASHER: {ApplicationConfig.PASSWORD_HASHER}")


def get_authentication(
    repository: IAccountRepository = Depends(get_account_repository),
    hasher=Depends(get_password_hasher),
    jwt_adapter: JwtAdapter = Depends(get_jwt_adapter),
) -> AuthenticationService:
    return AuthenticationService(repository, hasher, jwt_adapter)


def get_signup_controller(
    repository: IAccountRepository = Depends(get_account_repository),
    hasher=Depends(get_password_hasher),
    authentication: AuthenticationService = Depends(get_authentication),
) -> Controller:
    return SignupController(
        AddAccountUseCase(repository, hasher),
        make_signup_validation(EmailValidatorAdapter()),
        authentication,
    )


def get_login_controller(
    authentication: AuthenticationService = Depends(get_authentication),
) -> Controller:
    return LoginController(make_login_validation(EmailValidatorAdapter()), authentication)


def get_load_account_by_token(
    repository: IAccountRepository = Depends(get_account_repository),
    jwt_adapter: JwtAdapter = Depends(get_jwt_adapter),
) -> LoadAccountByTokenUseCase:
    return LoadAccountByTokenUseCase(jwt_adapter, repository)


async def get_current_account(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    use_case: LoadAccountByTokenUseCase = Depends(get_load_account_by_token),
) -> Account:
    """
    Dependency to resolve the account behind the Bearer token.

    Raises:
        ClientError: 403 if the token is missing, invalid or orphaned
        ServerError: 500 if the account store is unavailable
    """
    if credentials is None:
        raise ClientError(AccessDeniedError(), status_code=status.HTTP_403_FORBIDDEN)

    try:
        account = await use_case.load(credentials.credentials)
    except PersistenceError as exc:
        raise ServerError(InternalServerError(exc)) from exc

    if account is None:
        raise ClientError(AccessDeniedError(), status_code=status.HTTP_403_FORBIDDEN)

    return account
