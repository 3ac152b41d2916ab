import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from biztime.api.core.config import Settings
from biztime.api.core.db import Base, build_engine, get_db
from biztime.api.main import create_app
from biztime.api.models.company_model import Company
from biztime.api.models.invoice_model import Invoice


@pytest.fixture()
def engine():
    # One shared in-memory connection for the whole test
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def seed(db):
    """One company and one unpaid invoice, like a fresh BizTime database."""
    company = Company(code="tst", name="Test Co", description="Test description")
    invoice = Invoice(comp_code="tst", amt=1000, paid=False, paid_date=None)
    db.add_all([company, invoice])
    db.commit()
    db.refresh(invoice)
    return {"company": company, "invoice": invoice}


@pytest.fixture()
def app(session_factory):
    app = create_app(Settings(DATABASE_URL="sqlite://"), manage_database=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture()
def client(app, seed):
    with TestClient(app) as c:
        yield c
