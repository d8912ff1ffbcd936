"""
API tests for question templates.
"""

import pytest


async def create_question(client, payload):
    response = await client.post("/questions", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestQuestionsApi:
    @pytest.mark.asyncio
    async def test_create_and_list(self, client):
        radio = await create_question(
            client, {"type": "radio", "text": "Forklift?", "options": ["Yes", "No"]}
        )
        text = await create_question(client, {"type": "text", "text": "Site notes?"})

        assert radio["displayOrder"] == 1
        assert text["displayOrder"] == 2
        assert [o["text"] for o in radio["options"]] == ["Yes", "No"]

        listed = (await client.get("/questions")).json()
        assert [q["id"] for q in listed] == [radio["id"], text["id"]]
        assert "answers" not in listed[0]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"type": "text", "text": "Notes?", "options": ["Yes"]},
            {"type": "radio", "text": "Forklift?"},
            {"type": "dropdown", "text": "Forklift?", "options": ["Yes"]},
            {"type": "radio", "options": ["Yes"]},
        ],
    )
    async def test_invalid_payloads(self, client, payload):
        response = await client.post("/questions", json=payload)
        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_update_replaces_options(self, client):
        question = await create_question(
            client, {"type": "radio", "text": "Forklift?", "options": ["Yes", "No"]}
        )

        response = await client.put(
            f"/questions/{question['id']}",
            json={"type": "checkbox", "text": "Equipment?", "options": ["Forklift", "Crane"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["type"] == "checkbox"
        assert body["displayOrder"] == question["displayOrder"]
        assert [o["text"] for o in body["options"]] == ["Forklift", "Crane"]

    @pytest.mark.asyncio
    async def test_update_missing_question(self, client):
        response = await client.put("/questions/77", json={"type": "text", "text": "x"})
        assert response.status_code == 404
        assert response.json() == {"error": "Question not found"}

    @pytest.mark.asyncio
    async def test_get_with_answers(self, client):
        customer = (await client.post("/customers", json={"name": "Harbor"})).json()
        question = await create_question(client, {"type": "text", "text": "Site notes?"})
        job = (
            await client.post("/jobs", json={"name": "Count", "customerId": customer["id"]})
        ).json()
        await client.post(
            f"/jobs/{job['id']}/answers", json={"questionId": question["id"], "answer": "Gate 4"}
        )

        plain = (await client.get(f"/questions/{question['id']}")).json()
        expanded = (await client.get(f"/questions/{question['id']}?includeAnswers=true")).json()

        assert "answers" not in plain
        assert [a["answer"] for a in expanded["answers"]] == [["Gate 4"]]
        assert expanded["answers"][0]["jobId"] == job["id"]

    @pytest.mark.asyncio
    async def test_delete_unreferenced_question(self, client):
        question = await create_question(client, {"type": "text", "text": "Site notes?"})

        response = await client.delete(f"/questions/{question['id']}")
        assert response.status_code == 200

        assert (await client.get("/questions")).json() == []

    @pytest.mark.asyncio
    async def test_delete_referenced_question_conflicts(self, client):
        customer = (await client.post("/customers", json={"name": "Harbor"})).json()
        question = await create_question(
            client, {"type": "radio", "text": "Forklift?", "options": ["Yes", "No"]}
        )
        await client.post("/jobs", json={"name": "Count", "customerId": customer["id"]})

        response = await client.delete(f"/questions/{question['id']}")
        assert response.status_code == 409
        assert response.json() == {
            "error": "Cannot delete the question as it is referenced by another record."
        }

        cascaded = await client.delete(f"/questions/{question['id']}?cascade=true")
        assert cascaded.status_code == 200
        assert (await client.get("/questions")).json() == []

    @pytest.mark.asyncio
    async def test_delete_missing_question(self, client):
        response = await client.delete("/questions/404")
        assert response.status_code == 404
        assert response.json() == {
            "error": "The question you are trying to delete does not exist."
        }
