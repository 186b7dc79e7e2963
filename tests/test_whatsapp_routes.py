import logging
import pytest

WEBHOOK_URL = "/api/v1/whatsapp/webhook"


def _query(mode="subscribe", challenge="challenge123", token="verify-token"):
    return {"hub.mode": mode, "hub.challenge": challenge, "hub.verify_token": token}


class TestWebhookVerification:
    async def test_echoes_challenge(self, client):
        response = await client.get(WEBHOOK_URL, params=_query())
        assert response.status_code == 200
        assert response.json() == {"challenge": "challenge123"}

    async def test_echoes_unicode_challenge(self, client):
        challenge = "challenge-ä½ å¥½-🎉"
        response = await client.get(WEBHOOK_URL, params=_query(challenge=challenge))
        assert response.status_code == 200
        assert response.json()["challenge"] == challenge

    @pytest.mark.parametrize("missing", ["hub.mode", "hub.challenge", "hub.verify_token"])
    async def test_missing_parameter_is_bad_request(self, client, missing):
        params = _query()
        del params[missing]

        response = await client.get(WEBHOOK_URL, params=params)

        assert response.status_code == 400
        assert response.json() == {"message": "Bad Request"}

    @pytest.mark.parametrize("empty", ["hub.mode", "hub.challenge", "hub.verify_token"])
    async def test_empty_parameter_is_bad_request(self, client, empty):
        params = _query()
        params[empty] = ""

        response = await client.get(WEBHOOK_URL, params=params)

        assert response.status_code == 400
        assert response.json() == {"message": "Bad Request"}

    async def test_wrong_mode_is_forbidden(self, client):
        response = await client.get(WEBHOOK_URL, params=_query(mode="unsubscribe"))
        assert response.status_code == 403
        assert response.json() == {"error": "invalid mode, expected 'subscribe'"}

    async def test_wrong_token_is_forbidden(self, client, caplog):
        with caplog.at_level(logging.WARNING, logger="lucid_gateway.api.whatsapp"):
            response = await client.get(WEBHOOK_URL, params=_query(token="nope"))

        assert response.status_code == 403
        assert response.json() == {"error": "invalid verify token"}
        assert "Webhook verification failed" in caplog.text


class TestWebhookNotifications:
    async def test_text_message_is_received(self, client, caplog):
        payload = {
            "object": "whatsapp_business_account",
            "entry": [
                {
                    "id": "WABA_ID",
                    "changes": [
                        {
                            "field": "messages",
                            "value": {
                                "messaging_product": "whatsapp",
                                "metadata": {"display_phone_number": "15550000000", "phone_number_id": "123"},
                                "contacts": [{"profile": {"name": "Ana"}, "wa_id": "5215550001"}],
                                "messages": [
                                    {
                                        "from": "5215550001",
                                        "id": "wamid.1",
                                        "timestamp": "1700000000",
                                        "type": "text",
                                        "text": {"body": "hola"},
                                    }
                                ],
                            },
                        }
                    ],
                }
            ],
        }

        with caplog.at_level(logging.INFO, logger="lucid_gateway.api.whatsapp"):
            response = await client.post(WEBHOOK_URL, json=payload)

        assert response.status_code == 200
        assert response.json() == {"status": "received"}
        records = [r for r in caplog.records if r.getMessage() == "Received message"]
        assert len(records) == 1
        assert records[0].sender_name == "Ana"
        assert records[0].message_id == "wamid.1"

    async def test_status_only_payload_is_received(self, client):
        payload = {
            "object": "whatsapp_business_account",
            "entry": [{"id": "1", "changes": [{"field": "messages", "value": {"statuses": [{"id": "s1", "status": "read"}]}}]}],
        }
        response = await client.post(WEBHOOK_URL, json=payload)
        assert response.status_code == 200
        assert response.json() == {"status": "received"}

    async def test_other_object_is_ignored(self, client):
        response = await client.post(WEBHOOK_URL, json={"object": "page", "entry": []})
        assert response.status_code == 200
        assert response.json() == {"status": "ignored"}

    async def test_malformed_json_is_bad_request(self, client):
        response = await client.post(
            WEBHOOK_URL, content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Bad Request"}

    async def test_missing_object_is_ignored(self, client):
        response = await client.post(WEBHOOK_URL, json={"entry": []})
        assert response.status_code == 200
        assert response.json() == {"status": "ignored"}

    async def test_null_lists_are_received(self, client, caplog):
        payload = {
            "object": "whatsapp_business_account",
            "entry": [
                {
                    "id": "1",
                    "changes": [
                        {
                            "field": "messages",
                            "value": {
                                "contacts": None,
                                "statuses": None,
                                "metadata": None,
                                "messages": [{"from": "5215550001", "id": "wamid.2", "type": "text", "text": None}],
                            },
                        }
                    ],
                }
            ],
        }

        with caplog.at_level(logging.INFO, logger="lucid_gateway.api.whatsapp"):
            response = await client.post(WEBHOOK_URL, json=payload)

        assert response.status_code == 200
        assert response.json() == {"status": "received"}
        records = [r for r in caplog.records if r.getMessage() == "Received message"]
        assert [r.sender_name for r in records] == [""]

    async def test_null_entry_is_received(self, client):
        response = await client.post(WEBHOOK_URL, json={"object": "whatsapp_business_account", "entry": None})
        assert response.status_code == 200
        assert response.json() == {"status": "received"}

    async def test_non_object_body_is_bad_request(self, client):
        response = await client.post(WEBHOOK_URL, json=["whatsapp_business_account"])
        assert response.status_code == 400
        assert response.json() == {"message": "Bad Request"}
