from datetime import date

from fastapi.testclient import TestClient


def test_list_invoices_ordered_by_id(client: TestClient) -> None:
    response = client.get("/invoices")
    assert response.status_code == 200
    assert response.json() == {
        "invoices": [
            {"id": 1, "comp_code": "apple"},
            {"id": 2, "comp_code": "apple"},
            {"id": 3, "comp_code": "ibm"},
        ]
    }


def test_get_invoice_embeds_company(client: TestClient) -> None:
    response = client.get("/invoices/2")
    assert response.status_code == 200
    assert response.json() == {
        "invoice": {
            "id": 2,
            "amt": 200.0,
            "paid": True,
            "add_date": "2018-02-01",
            "paid_date": "2018-02-02",
            "company": {
                "code": "apple",
                "name": "Apple",
                "description": "Maker of OSX.",
            },
        }
    }


def test_get_missing_invoice_is_404(client: TestClient) -> None:
    response = client.get("/invoices/999")
    assert response.status_code == 404
    assert response.json() == {"error": {"message": "No such invoice: 999", "status": 404}}


def test_get_invoice_with_bad_id_is_rejected(client: TestClient) -> None:
    response = client.get("/invoices/abc")
    assert response.status_code == 400


def test_create_invoice_uses_store_defaults(client: TestClient) -> None:
    response = client.post("/invoices", json={"comp_code": "ibm", "amt": 400})
    assert response.status_code == 200
    assert response.json() == {
        "invoice": {
            "id": 4,
            "comp_code": "ibm",
            "amt": 400.0,
            "paid": False,
            "add_date": date.today().isoformat(),
            "paid_date": None,
        }
    }


def test_create_invoice_for_unknown_company_conflicts(client: TestClient) -> None:
    response = client.post("/invoices", json={"comp_code": "nope", "amt": 10})
    assert response.status_code == 409
    assert len(client.get("/invoices").json()["invoices"]) == 3


def test_create_invoice_with_non_positive_amount_conflicts(client: TestClient) -> None:
    response = client.post("/invoices", json={"comp_code": "ibm", "amt": 0})
    assert response.status_code == 409


def test_create_invoice_without_company_is_rejected(client: TestClient) -> None:
    response = client.post("/invoices", json={"amt": 10})
    assert response.status_code == 400


def test_paying_unpaid_invoice_stamps_today(client: TestClient) -> None:
    response = client.put("/invoices/1", json={"amt": 150, "paid": True})
    assert response.status_code == 200
    invoice = response.json()["invoice"]
    assert invoice["amt"] == 150
    assert invoice["paid"] is True
    assert invoice["paid_date"] is not None
    assert date.fromisoformat(invoice["paid_date"]) >= date(2018, 1, 1)
    assert invoice["paid_date"] == date.today().isoformat()


def test_repaying_paid_invoice_keeps_paid_date(client: TestClient) -> None:
    first = client.put("/invoices/2", json={"amt": 200, "paid": True}).json()["invoice"]
    second = client.put("/invoices/2", json={"amt": 250, "paid": True}).json()["invoice"]
    assert first["paid_date"] == "2018-02-02"
    assert second["paid_date"] == "2018-02-02"
    assert second["amt"] == 250


def test_unpaying_invoice_clears_paid_date(client: TestClient) -> None:
    response = client.put("/invoices/2", json={"amt": 200, "paid": False})
    invoice = response.json()["invoice"]
    assert invoice["paid"] is False
    assert invoice["paid_date"] is None


def test_update_without_amount_keeps_amount(client: TestClient) -> None:
    invoice = client.put("/invoices/3", json={"paid": True}).json()["invoice"]
    assert invoice["amt"] == 300
    assert invoice["paid"] is True


def test_update_without_paid_is_rejected(client: TestClient) -> None:
    response = client.put("/invoices/1", json={"amt": 150})
    assert response.status_code == 400


def test_update_missing_invoice_is_404(client: TestClient) -> None:
    response = client.put("/invoices/999", json={"amt": 1, "paid": True})
    assert response.status_code == 404


def test_delete_invoice(client: TestClient) -> None:
    response = client.delete("/invoices/1")
    assert response.status_code == 200
    assert response.json() == {"status": "DELETED"}
    assert client.get("/invoices/1").status_code == 404
    assert client.get("/companies/apple").json()["company"]["invoices"] == [2]


def test_delete_missing_invoice_is_404(client: TestClient) -> None:
    response = client.delete("/invoices/999")
    assert response.status_code == 404


def test_create_invoice_with_infinite_amount_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/invoices",
        content='{"comp_code": "ibm", "amt": 1e999}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["status"] == 400
    assert len(client.get("/invoices").json()["invoices"]) == 3


def test_update_invoice_with_infinite_amount_is_rejected(client: TestClient) -> None:
    response = client.put(
        "/invoices/1",
        content='{"amt": 1e999, "paid": true}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert client.get("/invoices/1").json()["invoice"]["amt"] == 100


def test_out_of_range_invoice_id_is_rejected(client: TestClient) -> None:
    huge = "99999999999999999999"
    assert client.get(f"/invoices/{huge}").status_code == 400
    assert client.put(f"/invoices/{huge}", json={"paid": True}).status_code == 400
    assert client.delete(f"/invoices/{huge}").status_code == 400
    assert client.get("/invoices/0").status_code == 400


def test_largest_invoice_id_is_not_found(client: TestClient) -> None:
    response = client.get(f"/invoices/{2**63 - 1}")
    assert response.status_code == 404
