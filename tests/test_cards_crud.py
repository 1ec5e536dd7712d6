# tests/test_cards_crud.py
def test_list_cards_returns_seed_in_order(app_client):
    r = app_client.get("/card")
    assert r.status_code == 200
    assert [card["id"] for card in r.json()] == ["1", "2", "3"]
    assert r.json()[0] == {"id": "1", "title": "Task One", "content": "This is card one"}


def test_create_card_then_fetch(app_client, board_store):
    c = app_client
    r = c.post("/card", json={"title": "Write tests", "content": "Cover the card routes"})
    assert r.status_code == 201
    card = r.json()
    assert card["title"] == "Write tests"
    assert card["content"] == "Cover the card routes"
    assert card["id"] not in {"1", "2", "3"}
    assert r.headers["location"] == f"http://testserver/card/{card['id']}"

    r2 = c.get(f"/card/{card['id']}")
    assert r2.status_code == 200
    assert r2.json() == card
    assert len(board_store.cards) == 4


def test_created_ids_are_unique(app_client):
    ids = {
        app_client.post("/card", json={"title": f"t{i}", "content": "c"}).json()["id"]
        for i in range(5)
    }
    assert len(ids) == 5


def test_create_card_strips_whitespace(app_client):
    r = app_client.post("/card", json={"title": "  Padded  ", "content": " body "})
    assert r.status_code == 201
    assert r.json()["title"] == "Padded"
    assert r.json()["content"] == "body"


def test_create_card_missing_fields_is_400_and_store_unchanged(app_client, board_store):
    c = app_client
    payloads = [
        {"content": "no title"},
        {"title": "no content"},
        {"title": "", "content": "x"},
        {"title": "x", "content": ""},
        {"title": "   ", "content": "x"},
        {"title": "x", "content": "   "},
        {"title": 5, "content": "x"},
        {},
    ]
    for payload in payloads:
        r = c.post("/card", json=payload)
        assert r.status_code == 400, payload
    assert len(board_store.cards) == 3


def test_create_card_whitespace_title_message(app_client):
    r = app_client.post("/card", json={"title": "   ", "content": "x"})
    assert r.json() == {"detail": "Invalid data. Title required."}
    r = app_client.post("/card", json={"title": "x", "content": "   "})
    assert r.json() == {"detail": "Invalid data. Content required."}


def test_get_unknown_card_is_404(app_client):
    r = app_client.get("/card/00000000-0000-0000-0000-000000000000")
    assert r.status_code == 404
    assert r.json() == {"detail": "Card not found"}


def test_delete_card_removes_it_from_every_list(app_client, board_store):
    c = app_client
    created = c.post("/list", json={"header": "Also has two", "cardIds": ["2", "1"]}).json()

    r = c.delete("/card/2")
    assert r.status_code == 204
    assert r.content == b""

    assert c.get("/card/2").status_code == 404
    assert c.get("/list/2").json()["cardIds"] == ["3"]
    assert c.get(f"/list/{created['id']}").json()["cardIds"] == ["1"]
    assert c.get("/list/1").json()["cardIds"] == ["1"]
    assert [card["id"] for card in board_store.cards] == ["1", "3"]


def test_delete_card_removes_duplicate_references(app_client):
    c = app_client
    created = c.post("/list", json={"header": "dupes", "cardIds": ["3", "3", "1"]}).json()
    assert created["cardIds"] == ["3", "3", "1"]
    assert c.delete("/card/3").status_code == 204
    assert c.get(f"/list/{created['id']}").json()["cardIds"] == ["1"]


def test_delete_unknown_card_is_404(app_client, board_store):
    r = app_client.delete("/card/nope")
    assert r.status_code == 404
    assert len(board_store.cards) == 3
    assert board_store.lists[1]["cardIds"] == ["2", "3"]


def test_delete_seed_scenario(app_client):
    c = app_client
    assert c.delete("/card/1").status_code == 204
    r = c.get("/list/1")
    assert r.status_code == 200
    assert r.json() == {"id": "1", "header": "List One", "cardIds": []}
