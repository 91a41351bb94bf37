"""Shared fixtures: an in-memory SQLite database per test, services wired to it."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.auth import ActingUser
from app.database import Base, get_db
from app.main import app as fastapi_app
from app.repositories import (
    AccountRepository,
    ContactRepository,
    LeadRepository,
    OpportunityRepository,
)
from app.services import (
    build_contact_service,
    build_lead_service,
    build_opportunity_service,
)
import app.models  # noqa: F401


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def user():
    return ActingUser(id="user-1", name="Test User")


@pytest.fixture()
def accounts(db_session):
    return AccountRepository(db_session)


@pytest.fixture()
def contacts(db_session):
    return ContactRepository(db_session)


@pytest.fixture()
def leads(db_session):
    return LeadRepository(db_session)


@pytest.fixture()
def opportunities(db_session):
    return OpportunityRepository(db_session)


@pytest.fixture()
def lead_service(db_session):
    return build_lead_service(db_session)


@pytest.fixture()
def opportunity_service(db_session):
    return build_opportunity_service(db_session)


@pytest.fixture()
def contact_service(db_session):
    return build_contact_service(db_session)


@pytest.fixture()
def converted(lead_service, user):
    """A lead for Acme that has been moved to an opportunity."""
    created = lead_service.create_lead(
        {
            "company_name": "Acme",
            "contact_name": "John Doe",
            "email": "john@acme.com",
            "department": "Growth",
            "sales_manager": "Sam",
            "delivery_manager": "Dana",
            "fte_count": 2,
            "expected_hours": 40,
            "comments": "Warm intro",
        },
        user,
    )
    return lead_service.convert_lead(created.lead.id, user)


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.clear()
