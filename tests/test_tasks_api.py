SAMPLE = "https://samplelib.com/lib/preview/mp4/sample-5s.mp4"


def _submit_mock(client) -> str:
    return client.post("/api/image-to-video", json={"provider": "runway"}).json()["task_id"]


def test_unknown_task_not_found(make_client):
    client = make_client()
    r = client.get("/api/task/unknown123")
    assert r.status_code == 200
    assert r.json() == {"status": "not_found"}


def test_fresh_task_is_processing(make_client, clock):
    client = make_client()
    task_id = _submit_mock(client)

    clock.advance(2999)
    body = client.get(f"/api/task/{task_id}").json()
    assert body["status"] == "processing"
    assert body["id"] == task_id
    assert isinstance(body["created"], int)
    assert "output" not in body


def test_task_succeeds_after_three_seconds(make_client, clock):
    client = make_client()
    task_id = _submit_mock(client)

    clock.advance(3001)
    body = client.get(f"/api/task/{task_id}").json()
    assert body["status"] == "succeeded"
    assert body["output"] == [{"url": SAMPLE}]


def test_task_output_uses_base_url(make_client, clock):
    client = make_client(base_url="https://buddy.example.com")
    task_id = _submit_mock(client)

    clock.advance(3500)
    body = client.get(f"/api/task/{task_id}").json()
    assert body["output"][0]["url"] == "https://buddy.example.com/static/sample.mp4"


def test_succeeded_task_is_idempotent(make_client, clock):
    client = make_client()
    task_id = _submit_mock(client)

    clock.advance(4000)
    first = client.get(f"/api/task/{task_id}").json()
    clock.advance(60_000)
    second = client.get(f"/api/task/{task_id}").json()
    assert first == second
    assert second["status"] == "succeeded"


def test_custom_completion_delay(make_client, clock):
    client = make_client(task_completion_delay_ms=100)
    task_id = _submit_mock(client)

    clock.advance(101)
    assert client.get(f"/api/task/{task_id}").json()["status"] == "succeeded"


def test_apps_do_not_share_tasks(make_client):
    first = make_client()
    second = make_client()
    task_id = _submit_mock(first)
    assert second.get(f"/api/task/{task_id}").json() == {"status": "not_found"}
