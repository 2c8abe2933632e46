"""Unit tests for the request dispatcher."""

import logging

import httpx
import pytest

from oaiclient import ConfigurationError, Err, ImageRequestType, Requester
from oaiclient.types import Completion, Model, ModelList


@pytest.mark.asyncio
async def test_post_sends_json_with_auth(requester, api, completion_payload):
    api.respond(200, completion_payload)

    await requester.submit("POST", "/completions", Completion, {"model": "m", "prompt": "hi"})

    request = api.last_request
    assert request.method == "POST"
    assert str(request.url) == "https://api.openai.com/v1/completions"
    assert request.headers["Authorization"] == "Bearer sk-test-key"
    assert request.headers["Content-Type"] == "application/json"
    assert api.last_body == {"model": "m", "prompt": "hi"}


@pytest.mark.asyncio
async def test_get_sends_auth_without_body(requester, api, model_payload):
    api.respond(200, model_payload)

    await requester.submit("GET", "/models/text-davinci-003", Model)

    request = api.last_request
    assert request.method == "GET"
    assert request.headers["Authorization"] == "Bearer sk-test-key"
    assert "Content-Type" not in request.headers
    assert request.content == b""


@pytest.mark.asyncio
async def test_success_decodes_body(requester, api, completion_payload):
    api.respond(200, completion_payload)

    result = await requester.submit("POST", "/completions", Completion, {"model": "m"})

    assert result.is_ok()
    assert result.value.model_dump() == completion_payload


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 404, 429, 500, 503])
async def test_error_status_returned_verbatim(requester, api, status):
    api.respond(status, {"error": {"message": "nope"}})

    result = await requester.submit("POST", "/completions", Completion, {"model": "m"})

    assert result == Err(status)


@pytest.mark.asyncio
async def test_error_status_body_not_parsed(requester, api):
    api.respond(500, raw=b"<html>not json</html>")

    result = await requester.submit("GET", "/models", ModelList)

    assert result == Err(500)


@pytest.mark.asyncio
async def test_non_200_success_code_is_an_error(requester, api, completion_payload):
    api.respond(201, completion_payload)

    result = await requester.submit("POST", "/completions", Completion, {"model": "m"})

    assert result == Err(201)


@pytest.mark.asyncio
async def test_wrong_shape_is_decode_error(requester, api, caplog):
    api.respond(200, {"id": "cmpl-1", "choices": "not a list"})

    with caplog.at_level(logging.WARNING, logger="oaiclient.requester"):
        result = await requester.submit("POST", "/completions", Completion, {"model": "m"})

    assert result == Err(400)
    assert "Could not decode Completion" in caplog.text


@pytest.mark.asyncio
async def test_invalid_json_is_decode_error(requester, api):
    api.respond(200, raw=b"{truncated")

    result = await requester.submit("GET", "/models", ModelList)

    assert result == Err(400)


@pytest.mark.asyncio
async def test_transport_failure_is_client_error(requester, api):
    api.fail(httpx.ConnectError("Connection refused"))

    result = await requester.submit("GET", "/models", ModelList)

    assert result == Err(400)


@pytest.mark.asyncio
async def test_missing_credential_fails_before_network(clean_env, api):
    requester = Requester(transport=httpx.MockTransport(api.handler))

    with pytest.raises(ConfigurationError):
        await requester.submit("GET", "/models", ModelList)

    assert api.requests == []


@pytest.mark.asyncio
async def test_credential_rederived_per_call(clean_env, monkeypatch, api):
    api.respond(200, {"data": []})
    requester = Requester(transport=httpx.MockTransport(api.handler))

    monkeypatch.setenv("OPENAI_API_KEY", "sk-first")
    await requester.submit("GET", "/models", ModelList)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-second")
    await requester.submit("GET", "/models", ModelList)

    assert [r.headers["Authorization"] for r in api.requests] == [
        "Bearer sk-first",
        "Bearer sk-second",
    ]


@pytest.mark.asyncio
async def test_key_not_logged(requester, api, caplog):
    api.respond(200, {"data": []})

    with caplog.at_level(logging.DEBUG, logger="oaiclient.requester"):
        await requester.submit("GET", "/models", ModelList)

    assert "GET https://api.openai.com/v1/models" in caplog.text
    assert "sk-test-key" not in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "request_type, path",
    [
        (ImageRequestType.GENERATIONS, "/v1/images/generations"),
        (ImageRequestType.EDITS, "/v1/images/edits"),
        (ImageRequestType.VARIATIONS, "/v1/images/variations"),
    ],
)
async def test_image_sub_paths(requester, api, images_payload, request_type, path):
    from oaiclient.types import Images

    api.respond(200, images_payload)

    await requester.images(request_type, {"prompt": "p"}, Images)

    assert api.last_request.url.path == path


@pytest.mark.asyncio
async def test_models_paths(requester, api, model_payload):
    api.respond(200, model_payload)

    await requester.models(Model, "text-davinci-003")
    assert api.last_request.url.path == "/v1/models/text-davinci-003"

    api.respond(200, {"data": [model_payload]})
    await requester.models(ModelList)
    assert api.last_request.url.path == "/v1/models"


@pytest.mark.asyncio
async def test_model_id_is_path_escaped(requester, api, model_payload):
    api.respond(200, model_payload)

    await requester.models(Model, "ft:org/../../completions")

    raw_path = api.last_request.url.raw_path
    assert raw_path.startswith(b"/v1/models/")
    assert b"%2F..%2F..%2Fcompletions" in raw_path
    assert len(api.requests) == 1


@pytest.mark.asyncio
async def test_model_id_with_control_character(requester, api):
    api.respond(404)

    result = await requester.models(Model, "bad\nid")

    assert result == Err(404)
    assert api.last_request.url.raw_path.endswith(b"bad%0Aid")


@pytest.mark.asyncio
async def test_invalid_url_is_client_error(api):
    from oaiclient import ClientConfig

    config = ClientConfig(api_key="sk-test-key", base_url="https://api.openai.com\n")
    requester = Requester(config, transport=httpx.MockTransport(api.handler))

    result = await requester.submit("GET", "/models", ModelList)

    assert result == Err(400)
    assert api.requests == []
