from plugins import qwen_model

from conftest import MockArgs, make_response


CRED = {"key_id": "A", "key_secret": "B"}


def test_plugin_structure():
    assert callable(qwen_model.handler)
    meta = qwen_model.Metadata
    assert meta["name"] == "qwen_model"
    assert meta["credentials"] == [{"name": "alibabaCloudApi", "required": True}]
    props = {p["name"]: p for p in meta["properties"]}
    assert len(props["model_category"]["options"]) == 7
    assert props["model_name"]["options_by_category"]["reasoning"] == [{"name": "qwq-plus", "value": "qwq-plus"}]
    assert "properties" in meta["input"] and "properties" in meta["output"]


def test_handler_success(patch_client):
    patch_client.queue(make_response(200, {"text": "hi"}))
    args = MockArgs({
        "items": [{"json": {}}],
        "model_name": "qwen-max",
        "prompt": "hello",
        "credentials": CRED,
    })
    out = qwen_model.handler(args)
    assert out.status == "OK"
    assert [r.model_dump(by_alias=True) for r in out.items] == [{"json": {"response": {"text": "hi"}}}]


def test_handler_missing_credential(patch_client):
    args = MockArgs({"items": [{"json": {}}, {"json": {}}], "model_name": "qwen-max", "prompt": "hi"})
    out = qwen_model.handler(args)
    assert out.status == "ERROR"
    assert out.err_code == "MISSING_CREDENTIAL"
    assert out.items is None
    assert patch_client.calls == []


def test_runtime_credentials_take_precedence(patch_client):
    patch_client.queue(make_response(200, {}))
    args = MockArgs(
        {"model_name": "qwen-max", "prompt": "hi", "credentials": {"key_id": "X", "key_secret": "Y"}},
        credentials={"accessKeyId": "A", "accessKeySecret": "B"},
    )
    out = qwen_model.handler(args)
    assert out.status == "OK"
    assert patch_client.calls[0]["headers"]["Authorization"] == "Bearer A:B"


def test_default_input_is_one_record(patch_client):
    patch_client.queue(make_response(200, {"text": "hi"}))
    out = qwen_model.handler(MockArgs({"model_name": "qwen-max", "prompt": "hi", "credentials": CRED}))
    assert len(out.items) == 1


def test_per_item_overrides(patch_client):
    patch_client.queue(make_response(200, {}), make_response(200, {}), make_response(200, {}))
    args = MockArgs({
        "items": [{"json": {}}, {"json": {}}, {"json": {}}],
        "model_name": "qwen-max",
        "prompt": "default",
        "per_item": [None, {"model_name": "qwq-plus", "prompt": "second"}],
        "credentials": CRED,
    })
    out = qwen_model.handler(args)
    assert out.status == "OK"
    urls = [c["url"].split("/")[-2] for c in patch_client.calls]
    prompts = [c["json"]["prompt"] for c in patch_client.calls]
    assert urls == ["qwen-max", "qwq-plus", "qwen-max"]
    assert prompts == ["default", "second", "default"]


def test_per_record_failure_does_not_fail_plugin(patch_client):
    patch_client.queue(make_response(404, {"message": "model not found"}), make_response(200, {"text": "ok"}))
    args = MockArgs({
        "items": [{"json": {"i": 0}}, {"json": {"i": 1}}],
        "model_name": "qwen-max",
        "prompt": "hi",
        "credentials": CRED,
    })
    out = qwen_model.handler(args)
    assert out.status == "OK"
    assert out.items[0].data == {"i": 0, "error": {"message": "model not found"}}
    assert out.items[1].data == {"i": 1, "response": {"text": "ok"}}


def test_timeout_forwarded(patch_client):
    patch_client.queue(make_response(200, {}))
    qwen_model.handler(MockArgs({"model_name": "qwen-max", "prompt": "hi", "credentials": CRED, "timeout": 3}))
    assert patch_client.calls[0]["timeout"] == 3


def test_invalid_input_reports_plugin_error(patch_client):
    out = qwen_model.handler(MockArgs({"model_category": "premium", "credentials": CRED}))
    assert out.status == "ERROR"
    assert out.err_code == "PLUGIN_ERROR"
    assert patch_client.calls == []


def test_output_dump_uses_host_json_key(patch_client):
    patch_client.queue(make_response(200, {"text": "hi"}))
    args = MockArgs({
        "items": [{"json": {}}],
        "model_name": "qwen-max",
        "prompt": "hello",
        "credentials": CRED,
    })
    dumped = qwen_model.handler(args).model_dump()
    assert dumped["items"] == [{"json": {"response": {"text": "hi"}}}]


def test_incomplete_runtime_credentials_fall_back_to_input(patch_client):
    patch_client.queue(make_response(200, {}))
    args = MockArgs(
        {"model_name": "qwen-max", "prompt": "hi", "credentials": CRED},
        credentials={"accessKeyId": "X"},
    )
    out = qwen_model.handler(args)
    assert out.status == "OK"
    assert patch_client.calls[0]["headers"]["Authorization"] == "Bearer A:B"
