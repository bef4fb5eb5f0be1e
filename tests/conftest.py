# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from pager_admin.core.security import hash_api_token, hash_password
from pager_admin.db.session import Base
from pager_admin.db.session import get_db as app_get_session
from pager_admin.main import app as fastapi_app
from pager_admin.models import (
    Account,
    AdminGroup,
    AdminGroupMember,
    Device,
    Dispatcher,
    Enterprise,
    MessageTemplate,
    PagerGroup,
    PagerGroupMember,
    PublicApiToken,
)
from pager_admin.pagination import TokenCodec
from pager_admin.services.opid import opid_mask

TEST_DB_URL = "sqlite://"
API_TOKEN = "test-public-api-token"
OTHER_API_TOKEN = "other-public-api-token"

_SEQ = count(1)

# Hashed once; bcrypt is slow.
FIXTURE_PASSWORD_HASH = hash_password("secret")


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def codec() -> TokenCodec:
    """Codec with a fixed key, independent of application settings."""
    return TokenCodec("test-pagination-secret")


def _make_enterprise(db: Session, name: str, token: str) -> Enterprise:
    enterprise = Enterprise(name=name, super_admin_email=f"owner@{name.lower()}.test")
    db.add(enterprise)
    db.flush()
    db.add(PublicApiToken(enterprise_id=enterprise.id, token_hash=hash_api_token(token)))
    db.flush()
    return enterprise


@pytest.fixture()
def enterprise(db_session: Session) -> Enterprise:
    """Create the enterprise the primary API token belongs to."""
    return _make_enterprise(db_session, "Acme", API_TOKEN)


@pytest.fixture()
def other_enterprise(db_session: Session) -> Enterprise:
    """Create a second tenant to check isolation."""
    return _make_enterprise(db_session, "Globex", OTHER_API_TOKEN)


@pytest.fixture()
def auth_headers(enterprise: Enterprise) -> dict[str, str]:
    """Return authorization headers for the primary enterprise."""
    return {"Authorization": f"Bearer {API_TOKEN}"}


@pytest.fixture()
def other_auth_headers(other_enterprise: Enterprise) -> dict[str, str]:
    return {"Authorization": f"Bearer {OTHER_API_TOKEN}"}


@pytest.fixture()
def make_dispatcher(db_session: Session) -> Callable[..., Dispatcher]:
    """Return a factory persisting administrators."""

    def _make(enterprise_id: int, **overrides: Any) -> Dispatcher:
        n = next(_SEQ)
        values: dict[str, Any] = {
            "enterprise_id": enterprise_id,
            "email": f"dispatcher{n}@example.test",
            "password_hash": FIXTURE_PASSWORD_HASH,
            "first_name": f"First{n}",
            "last_name": f"Last{n}",
            "phone_number": "+15550000000",
        }
        values.update(overrides)
        dispatcher = Dispatcher(**values)
        db_session.add(dispatcher)
        db_session.flush()
        return dispatcher

    return _make


@pytest.fixture()
def make_admin_group(db_session: Session) -> Callable[..., AdminGroup]:
    def _make(enterprise_id: int, name: str, members: list[int] | None = None) -> AdminGroup:
        group = AdminGroup(enterprise_id=enterprise_id, name=name)
        group.members = [AdminGroupMember(dispatcher_id=member) for member in members or []]
        db_session.add(group)
        db_session.flush()
        return group

    return _make


@pytest.fixture()
def make_account(db_session: Session) -> Callable[..., Account]:
    """Return a factory persisting contacts, optionally with a device."""

    def _make(enterprise_id: int, pager_on: bool | None = None, **overrides: Any) -> Account:
        n = next(_SEQ)
        opid = overrides.pop("pager_number", f"contact-{n}")
        values: dict[str, Any] = {
            "enterprise_id": enterprise_id,
            "pager_number": opid,
            "alternative_pager_number": opid_mask(opid),
            "email": f"contact{n}@example.test",
            "password_hash": FIXTURE_PASSWORD_HASH,
            "first_name": f"Contact{n}",
            "last_name": f"Person{n}",
        }
        values.update(overrides)
        account = Account(**values)
        if pager_on is not None:
            account.device = Device(pager_on=pager_on)
        db_session.add(account)
        db_session.flush()
        return account

    return _make


@pytest.fixture()
def make_pager_group(db_session: Session) -> Callable[..., PagerGroup]:
    def _make(
        enterprise_id: int,
        name: str,
        opid: str | None = None,
        members: list[int] | None = None,
        **overrides: Any,
    ) -> PagerGroup:
        opid = opid or f"group-{next(_SEQ)}"
        group = PagerGroup(
            enterprise_id=enterprise_id,
            name=name,
            pager_number=opid,
            alternative_pager_number=opid_mask(opid),
            **overrides,
        )
        group.members = [PagerGroupMember(account_id=member) for member in members or []]
        db_session.add(group)
        db_session.flush()
        return group

    return _make


@pytest.fixture()
def make_template(db_session: Session) -> Callable[..., MessageTemplate]:
    def _make(enterprise_id: int, name: str, **overrides: Any) -> MessageTemplate:
        values: dict[str, Any] = {
            "enterprise_id": enterprise_id,
            "name": name,
            "subject": f"{name} subject",
        }
        values.update(overrides)
        template = MessageTemplate(**values)
        db_session.add(template)
        db_session.flush()
        return template

    return _make
