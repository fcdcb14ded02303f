from conftest import ACCOUNTS, ADMIN, payment_payload, student_payload


def setup_student(client):
    res = client.post("/api/students", json=student_payload(), headers=ADMIN)
    assert res.status_code == 201


def test_create_and_list_payments(client):
    setup_student(client)
    res = client.post("/api/payments", json=payment_payload(studentId="s001"))
    assert res.status_code == 201
    assert res.json()["studentId"] == "S001"

    client.post("/api/payments", json=payment_payload(receiptNo="R-2", date="2024-03-10", month="February"))

    rows = client.get("/api/payments").json()
    assert [r["receiptNo"] for r in rows] == ["R-2", "R-1"]

    rows = client.get("/api/payments", params={"studentId": "S002"}).json()
    assert rows == []


def test_payment_for_unknown_student(client):
    res = client.post("/api/payments", json=payment_payload(studentId="S404"))
    assert res.status_code == 404
    assert "S404" in res.json()["detail"]


def test_payment_missing_fields(client):
    payload = payment_payload()
    del payload["receiptNo"]
    assert client.post("/api/payments", json=payload).status_code == 400


def test_month_list_is_kept(client):
    setup_student(client)
    res = client.post("/api/payments", json=payment_payload(month=["January", "February"]))
    assert res.status_code == 201
    assert res.json()["month"] == ["January", "February"]


def test_class_payment(client):
    res = client.post("/api/payments", json=payment_payload(studentId="CLASS-6-GOLAP", feeType="DIARY"))
    assert res.status_code == 201

    res = client.post("/api/payments", json=payment_payload(studentId="CLASS-6-LAL", feeType="DIARY"))
    assert res.status_code == 400


def test_batch_student_payment(client):
    setup_student(client)
    res = client.post("/api/payments/batch", json={
        "receiptNo": "R-10",
        "year": 2024,
        "date": "2024-03-12",
        "studentId": "S001",
        "sectors": [
            {"feeType": "TUITION FEE", "month": ["January", "February"], "amount": 500},
            {"feeType": "YEARLY EXAM", "amount": 300},
        ],
    })
    assert res.status_code == 201, res.text
    assert [(r["feeType"], r["month"]) for r in res.json()] == [
        ("TUITION FEE", "January"),
        ("TUITION FEE", "February"),
        ("YEARLY EXAM", "N/A"),
    ]

    row = client.get("/api/students").json()[0]
    assert row["dueMonths"] == "March (Due)"


def test_batch_class_payment(client):
    res = client.post("/api/payments/batch", json={
        "receiptNo": "R-11",
        "year": 2024,
        "date": "2024-03-12",
        "paymentClass": 8,
        "paymentSection": "PADMA",
        "sectors": [{"feeType": "SPORTS", "month": ["March"], "amount": 900}],
    })
    assert res.status_code == 201
    assert res.json()[0]["studentId"] == "CLASS-8-PADMA"


def test_batch_validation_errors(client):
    setup_student(client)
    base = {"receiptNo": "R-12", "year": 2024, "date": "2024-03-12"}

    res = client.post("/api/payments/batch", json=dict(base, sectors=[{"feeType": "DIARY", "month": ["May"], "amount": 1}]))
    assert res.status_code == 400

    res = client.post("/api/payments/batch", json=dict(base, studentId="S001", sectors=[
        {"feeType": "VEHICLE FEE", "month": [], "amount": 150},
    ]))
    assert res.status_code == 400
    assert "VEHICLE FEE" in res.json()["detail"]
    assert client.get("/api/payments").json() == []


def test_only_accounts_officer_edits_payments(client):
    setup_student(client)
    payment_id = client.post("/api/payments", json=payment_payload()).json()["id"]

    update = payment_payload(month="March", amount=550)
    assert client.put(f"/api/payments/{payment_id}", json=update, headers=ADMIN).status_code == 403

    res = client.put(f"/api/payments/{payment_id}", json=update, headers=ACCOUNTS)
    assert res.status_code == 200
    assert res.json()["month"] == "March"
    assert res.json()["amount"] == 550

    assert client.put("/api/payments/999", json=update, headers=ACCOUNTS).status_code == 404
    assert client.delete(f"/api/payments/{payment_id}", headers=ADMIN).status_code == 403
    assert client.delete(f"/api/payments/{payment_id}", headers=ACCOUNTS).status_code == 200
    assert client.delete(f"/api/payments/{payment_id}", headers=ACCOUNTS).status_code == 404


def test_meta_options(client):
    body = client.get("/api/meta").json()
    assert body["months"][0] == "January"
    assert "GOLAP" in body["classes"]["6"]
    assert "TUITION FEE" in body["allFeeTypes"]
