import asyncio

import pytest

from src import config
from src.agents.invoker import AgentInvoker
from src.payloads import fixtures
from src.payloads.models import ContentPayload
from src.workflow.context import AppContext
from src.workflow.workflows import CONTENT, HASHTAGS, SCHEDULE, build_controllers
from src.workflow.controller import WorkflowController
from tests.utils.fakes import DummyLogger, FakeAgentClient, GatedAgentClient, success


def _controller(definition, client, context=None):
    context = context or AppContext()
    return WorkflowController(definition, AgentInvoker(client, DummyLogger()), context, DummyLogger())


async def _wait_for_calls(client, n):
    while len(client.calls) < n:
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_invalid_generate_sets_message_and_skips_agent():
    client = FakeAgentClient()
    ctrl = _controller(CONTENT, client)

    view = await ctrl.generate()

    assert view.status == "idle"
    assert ctrl.validation_error == "Please enter a topic or theme."
    assert ctrl.error_message == "Please enter a topic or theme."
    assert client.calls == []
    assert ctrl.context.active_agent_id is None


@pytest.mark.asyncio
async def test_invalid_generate_keeps_previous_result():
    client = FakeAgentClient(success({"post_content": "First"}))
    ctrl = _controller(CONTENT, client)
    ctrl.update_form(topic="launching an MVP")
    await ctrl.generate()

    ctrl.update_form(topic="  ")
    view = await ctrl.generate()

    assert view.status == "success"
    assert view.payload.post_content == "First"
    assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_successful_generate_sends_prompt_and_parses_payload():
    client = FakeAgentClient(success({"post_content": "Hello", "carousel_slides": "bad"}))
    ctrl = _controller(CONTENT, client)
    ctrl.update_form(topic="launching an MVP")

    view = await ctrl.generate()

    assert client.calls == [
        ("Create a short post for LinkedIn about: launching an MVP", config.AGENT_CONTENT_CREATOR)
    ]
    assert view.status == "success"
    assert isinstance(view.payload, ContentPayload)
    assert view.payload.post_content == "Hello"
    assert view.payload.carousel_slides is None
    assert ctrl.error_message is None


@pytest.mark.asyncio
async def test_valid_generate_clears_previous_validation_message():
    ctrl = _controller(HASHTAGS, FakeAgentClient())
    await ctrl.generate()
    assert ctrl.validation_error

    ctrl.update_form(content="We shipped")
    await ctrl.generate()
    assert ctrl.validation_error is None


@pytest.mark.asyncio
async def test_failed_generate_surfaces_reason():
    ctrl = _controller(HASHTAGS, FakeAgentClient({"success": False}))
    ctrl.update_form(content="We shipped")

    view = await ctrl.generate()

    assert view.status == "failure"
    assert view.reason == "Failed to generate hashtags."
    assert ctrl.error_message == "Failed to generate hashtags."


@pytest.mark.asyncio
async def test_transport_failure_surfaces_network_message():
    ctrl = _controller(SCHEDULE, FakeAgentClient(exc=ConnectionError("down")))
    ctrl.update_form(description="B2B SaaS")

    view = await ctrl.generate()
    assert view.reason == config.NETWORK_ERROR_MESSAGE


@pytest.mark.asyncio
async def test_active_agent_is_set_while_loading_and_cleared_on_settle():
    client = GatedAgentClient()
    ctrl = _controller(CONTENT, client)
    ctrl.update_form(topic="x")

    task = asyncio.create_task(ctrl.generate())
    await _wait_for_calls(client, 1)

    assert ctrl.view.status == "loading"
    assert ctrl.context.active_agent_id == config.AGENT_CONTENT_CREATOR
    statuses = {s.agent_id: s.active for s in ctrl.context.agent_statuses()}
    assert statuses[config.AGENT_CONTENT_CREATOR] is True
    assert statuses[config.AGENT_HASHTAG_GENERATOR] is False

    client.release(0, success({"post_content": "done"}))
    await task

    assert ctrl.view.status == "success"
    assert ctrl.context.active_agent_id is None


@pytest.mark.asyncio
async def test_overlapping_generates_last_settle_wins():
    client = GatedAgentClient()
    ctrl = _controller(CONTENT, client)
    ctrl.update_form(topic="first")
    first = asyncio.create_task(ctrl.generate())
    await _wait_for_calls(client, 1)

    ctrl.update_form(topic="second")
    second = asyncio.create_task(ctrl.generate())
    await _wait_for_calls(client, 2)

    client.release(1, success({"post_content": "from second"}))
    await second
    assert ctrl.view.payload.post_content == "from second"
    # first settle clears the indicator even though another call is in flight
    assert ctrl.context.active_agent_id is None

    client.release(0, {"success": False, "error": "late failure"})
    await first
    assert ctrl.view.status == "failure"
    assert ctrl.view.reason == "late failure"


@pytest.mark.asyncio
async def test_sample_data_round_trip_restores_defaults():
    context = AppContext()
    ctrl = _controller(CONTENT, FakeAgentClient(), context)

    context.set_sample_data(True)
    assert ctrl.showing_fixture
    assert ctrl.view.payload is fixtures.SAMPLE_CONTENT
    assert ctrl.form.topic == fixtures.SAMPLE_CONTENT_FORM["topic"]

    ctrl.update_form(platform="instagram")
    context.set_sample_data(False)

    assert ctrl.view.status == "idle"
    assert ctrl.form.topic == ""
    assert ctrl.form.platform == "linkedin"


@pytest.mark.asyncio
async def test_sample_data_off_keeps_live_result():
    context = AppContext()
    client = FakeAgentClient(success({"post_content": "live"}))
    ctrl = _controller(CONTENT, client, context)

    context.set_sample_data(True)
    await ctrl.generate()
    assert not ctrl.showing_fixture

    context.set_sample_data(False)
    assert ctrl.view.status == "success"
    assert ctrl.view.payload.post_content == "live"
    assert ctrl.form.topic == fixtures.SAMPLE_CONTENT_FORM["topic"]


def test_sample_data_on_does_not_replace_existing_result():
    context = AppContext()
    ctrl = _controller(CONTENT, FakeAgentClient(), context)
    ctrl.view = ctrl.view.failure("earlier failure")

    context.set_sample_data(True)
    assert ctrl.view.status == "failure"


def test_controller_built_with_sample_data_on_shows_fixture():
    context = AppContext(sample_data=True)
    controllers = build_controllers(context, AgentInvoker(FakeAgentClient(), DummyLogger()), DummyLogger())

    assert set(controllers) == {"content", "hashtags", "schedule", "analytics"}
    assert all(c.showing_fixture for c in controllers.values())
    assert controllers["schedule"].form.description == fixtures.SAMPLE_SCHEDULE_FORM["description"]


def test_brand_voice_seeds_empty_voice_only():
    context = AppContext(brand_voice="Warm")
    ctrl = _controller(CONTENT, FakeAgentClient(), context)
    assert ctrl.form.voice == "Warm"

    ctrl.update_form(voice="")
    context.set_brand_voice("Bold")
    assert ctrl.form.voice == "Bold"

    context.set_brand_voice("Quiet")
    assert ctrl.form.voice == "Bold"


def test_brand_voice_ignored_by_workflows_without_voice_field():
    context = AppContext()
    ctrl = _controller(HASHTAGS, FakeAgentClient(), context)
    context.set_brand_voice("Warm")
    assert "voice" not in ctrl.form.model_dump()


@pytest.mark.asyncio
async def test_reset_returns_to_idle_defaults():
    ctrl = _controller(CONTENT, FakeAgentClient(success({"post_content": "x"})))
    ctrl.update_form(topic="t", format="carousel")
    await ctrl.generate()

    ctrl.reset()
    assert ctrl.view.status == "idle"
    assert ctrl.form.topic == ""
    assert ctrl.form.format == "short_post"
