import pytest
from pydantic import ValidationError

from biztime.api.schemas.company_schema import CompanyCreate, CompanyUpdate
from biztime.api.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate


def test_company_create_requires_every_key():
    with pytest.raises(ValidationError):
        CompanyCreate(code="tsl", name="Tesla")


def test_company_create_empty_values_are_present():
    company = CompanyCreate(code="", name="", description="")

    assert company.model_fields_set == {"code", "name", "description"}


def test_company_update_rejects_code():
    with pytest.raises(ValidationError, match="code cannot be changed"):
        CompanyUpdate.model_validate({"code": "x", "name": "n", "description": "d"})


def test_company_update_ignores_unknown_keys():
    update = CompanyUpdate.model_validate({"name": "n", "description": "d", "extra": 1})

    assert update.name == "n"


def test_invoice_create_requires_amt():
    with pytest.raises(ValidationError):
        InvoiceCreate.model_validate({"comp_code": "tst"})


def test_invoice_update_rejects_id():
    with pytest.raises(ValidationError, match="id cannot be changed"):
        InvoiceUpdate.model_validate({"id": 1, "amt": 10, "paid": True})


def test_invoice_update_requires_paid():
    with pytest.raises(ValidationError):
        InvoiceUpdate.model_validate({"amt": 10})
