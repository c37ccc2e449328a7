from .helpers import read_pdf, shown_strings


def _create(client, title="Water Cycle", markdown="## Day 1\nEvaporation (warm-up)"):
	r = client.post("/lessons", json={"title": title, "markdown": markdown})
	assert r.status_code == 201
	return r.json()


def test_create_and_fetch_lesson(client):
	created = _create(client)
	r = client.get(f"/lessons/{created['id']}")
	assert r.status_code == 200
	assert r.json()["title"] == "Water Cycle"
	assert r.json()["markdown"] == "## Day 1\nEvaporation (warm-up)"


def test_create_rejects_blank_markdown(client):
	assert client.post("/lessons", json={"title": "x", "markdown": "  "}).status_code == 400


def test_blank_title_gets_default(client):
	assert _create(client, title="  ")["title"] == "Lesson Plan"


def test_list_returns_all_lessons(client):
	_create(client, title="First")
	_create(client, title="Second")
	titles = [row["title"] for row in client.get("/lessons").json()]
	assert sorted(titles) == ["First", "Second"]


def test_update_lesson(client):
	created = _create(client)
	r = client.put(f"/lessons/{created['id']}", json={"markdown": "Condensation"})
	assert r.status_code == 200
	assert r.json()["markdown"] == "Condensation"
	assert r.json()["title"] == "Water Cycle"
	assert client.put(f"/lessons/{created['id']}", json={"markdown": ""}).status_code == 400


def test_delete_lesson(client):
	created = _create(client)
	assert client.delete(f"/lessons/{created['id']}").status_code == 204
	assert client.get(f"/lessons/{created['id']}").status_code == 404


def test_missing_lesson_is_404(client):
	assert client.get("/lessons/999").status_code == 404
	assert client.get("/lessons/999/export/pdf").status_code == 404


def test_export_saved_lesson(client):
	created = _create(client)
	r = client.get(f"/lessons/{created['id']}/export/pdf", params={"variant": "student"})
	assert r.status_code == 200
	assert 'filename="Water_Cycle-student.pdf"' in r.headers["content-disposition"]
	strings = shown_strings(read_pdf(r.content).pages[0])
	assert strings == ["Water Cycle", "Day 1", "Evaporation (warm-up)"]
