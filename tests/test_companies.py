from biztime.api.models.company_model import Company
from biztime.api.models.invoice_model import Invoice


# ============================================================
# GET /companies
# ============================================================
def test_list_companies(client):
    response = client.get("/companies")

    assert response.status_code == 200
    assert response.json() == {"companies": [{"code": "tst", "name": "Test Co"}]}


def test_list_companies_trailing_slash(client):
    response = client.get("/companies/", follow_redirects=False)

    assert response.status_code == 200
    assert response.json()["companies"][0]["code"] == "tst"


# ============================================================
# GET /companies/{code}
# ============================================================
def test_get_company_includes_invoice_ids(client, seed):
    response = client.get("/companies/tst")

    assert response.status_code == 200
    assert response.json() == {
        "company": {
            "code": "tst",
            "name": "Test Co",
            "description": "Test description",
            "invoices": [seed["invoice"].id],
        }
    }


def test_get_company_not_found(client):
    response = client.get("/companies/nope")

    assert response.status_code == 404
    assert response.json()["error"]["status"] == 404


# ============================================================
# POST /companies
# ============================================================
def test_create_company_then_read_it_back(client, db):
    payload = {"code": "tsl", "name": "Tesla", "description": "Electric cars"}

    response = client.post("/companies", json=payload)

    assert response.status_code == 201
    assert response.json() == {"company": payload}
    assert db.query(Company).filter(Company.code == "tsl").count() == 1

    detail = client.get("/companies/tsl").json()
    assert detail == {"company": {**payload, "invoices": []}}


def test_create_company_accepts_empty_strings(client):
    payload = {"code": "emp", "name": "", "description": ""}

    response = client.post("/companies", json=payload)

    assert response.status_code == 201
    assert response.json() == {"company": payload}


def test_create_company_empty_body(client, db):
    response = client.post("/companies")

    assert response.status_code == 400
    assert db.query(Company).count() == 1


def test_create_company_missing_key(client, db):
    response = client.post("/companies", json={"code": "tsl", "name": "Tesla"})

    assert response.status_code == 400
    assert "description" in response.json()["error"]["message"]
    assert db.query(Company).filter(Company.code == "tsl").count() == 0


def test_create_company_duplicate_code_is_server_error(client):
    payload = {"code": "tst", "name": "Other", "description": "dup"}

    response = client.post("/companies", json=payload)

    assert response.status_code == 500
    assert response.json()["error"]["status"] == 500


# ============================================================
# PUT /companies/{code}
# ============================================================
def test_update_company(client):
    response = client.put(
        "/companies/tst",
        json={"name": "Test Co2", "description": "Test description2"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "company": {"code": "tst", "name": "Test Co2", "description": "Test description2"}
    }


def test_update_company_empty_body(client):
    response = client.put("/companies/tst")

    assert response.status_code == 400


def test_update_company_rejects_code(client, db):
    response = client.put(
        "/companies/tst",
        json={"code": "new", "name": "Test Co2", "description": "Test description2"},
    )

    assert response.status_code == 400
    assert db.query(Company).filter(Company.code == "tst").one().name == "Test Co"


def test_update_company_rejects_code_alone(client):
    response = client.put("/companies/tst", json={"code": "new"})

    assert response.status_code == 400


def test_update_company_not_found(client):
    response = client.put(
        "/companies/nope",
        json={"name": "Test Co2", "description": "Test description2"},
    )

    assert response.status_code == 404


# ============================================================
# DELETE /companies/{code}
# ============================================================
def test_delete_company(client):
    response = client.delete("/companies/tst")

    assert response.status_code == 200
    assert response.json() == {"status": "deleted"}
    assert client.get("/companies").json() == {"companies": []}


def test_delete_company_cascades_to_invoices(client, db, seed):
    client.delete("/companies/tst")

    assert db.query(Invoice).count() == 0
    assert client.get(f"/invoices/{seed['invoice'].id}").status_code == 404


def test_delete_company_not_found(client):
    response = client.delete("/companies/nope")

    assert response.status_code == 404
