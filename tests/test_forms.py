from formbot.models.form import Form


def _make_folder(client, name="Onboarding"):
    return client.post("/api/folders", json={"name": name}).json()


def test_create_form(client):
    folder = _make_folder(client)
    response = client.post("/api/forms", json={"name": "Contact", "folderId": folder["id"]})
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Contact"
    assert body["folderId"] == folder["id"]


def test_create_form_in_unknown_folder(client, session_factory):
    response = client.post("/api/forms", json={"name": "Contact", "folderId": 999})
    assert response.status_code == 404
    assert response.json()["detail"] == "Folder not found"
    with session_factory() as session:
        assert session.query(Form).count() == 0


def test_create_form_validation(client):
    folder = _make_folder(client)
    assert client.post("/api/forms", json={"name": "Contact"}).status_code == 400
    assert client.post("/api/forms", json={"folderId": folder["id"]}).status_code == 400
    assert client.post("/api/forms", json={"name": "", "folderId": folder["id"]}).status_code == 400


def test_new_form_shows_up_in_its_folder(client, auth_headers):
    folder = _make_folder(client)
    first = client.post("/api/forms", json={"name": "Contact", "folderId": folder["id"]}).json()
    second = client.post("/api/forms", json={"name": "Survey", "folderId": folder["id"]}).json()

    folders = client.get("/folders", headers=auth_headers).json()
    assert [f["id"] for f in folders[0]["forms"]] == [first["id"], second["id"]]


def test_list_forms_by_folder(client):
    onboarding = _make_folder(client, "Onboarding")
    offboarding = _make_folder(client, "Offboarding")
    client.post("/api/forms", json={"name": "Contact", "folderId": onboarding["id"]})
    client.post("/api/forms", json={"name": "Exit interview", "folderId": offboarding["id"]})

    response = client.get(f"/api/forms/{onboarding['id']}")
    assert response.status_code == 200
    assert [form["name"] for form in response.json()] == ["Contact"]

    assert client.get("/api/forms/12345").json() == []


def test_deleted_form_leaves_its_folder(client, auth_headers):
    folder = _make_folder(client)
    kept = client.post("/api/forms", json={"name": "Contact", "folderId": folder["id"]}).json()
    dropped = client.post("/api/forms", json={"name": "Survey", "folderId": folder["id"]}).json()

    response = client.delete(f"/api/forms/{dropped['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Form deleted successfully"}

    folders = client.get("/folders", headers=auth_headers).json()
    assert [f["id"] for f in folders[0]["forms"]] == [kept["id"]]
    assert client.get("/api/folders").json()[0]["forms"] == [kept["id"]]


def test_delete_unknown_form(client):
    response = client.delete("/api/forms/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Form not found"


def test_deleting_a_folder_keeps_its_forms(client, session_factory):
    folder = _make_folder(client)
    form = client.post("/api/forms", json={"name": "Contact", "folderId": folder["id"]}).json()

    assert client.delete(f"/api/folders/{folder['id']}").status_code == 200

    with session_factory() as session:
        orphan = session.get(Form, form["id"])
        assert orphan is not None
        assert orphan.name == "Contact"
        assert orphan.folder_id == folder["id"]

    listed = client.get(f"/api/forms/{folder['id']}")
    assert listed.status_code == 200
    assert listed.json() == [{"id": form["id"], "name": "Contact", "folderId": folder["id"]}]
