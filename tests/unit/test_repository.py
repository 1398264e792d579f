import asyncio

import pytest

from newsline.core.exceptions import PayloadParseError, TransportConnectionError
from newsline.core.models.news import NewsResponse
from newsline.core.models.result_state import Error, Loading, StateKind, Success
from newsline.core.repository import NewsRepository, collect
from newsline.integrations.newsapi_client import ApiResponse


def run_sequence(sequence):
    return asyncio.run(collect(sequence))


def test_headlines_success_emits_loading_then_success(fake_data_source_factory, sample_response):
    """Scenario A: 200 with a body ends in Success(body)."""
    data_source = fake_data_source_factory(ApiResponse(status=200, body=sample_response))
    repository = NewsRepository(data_source)

    states = run_sequence(repository.get_headlines("us"))

    assert states == [Loading(), Success(sample_response)]
    assert data_source.calls == [{"operation": "headlines", "country": "us"}]


def test_search_server_error_without_body_emits_empty_error(fake_data_source_factory):
    """Scenario B: 500 with no body ends in Error with neither field set."""
    data_source = fake_data_source_factory(ApiResponse(status=500, body=None))
    repository = NewsRepository(data_source)

    states = run_sequence(repository.search_articles("bitcoin"))

    assert states == [Loading(), Error(error=None, exception=None)]
    assert data_source.calls == [{"operation": "search", "query": "bitcoin"}]


def test_headlines_connectivity_fault_is_isolated(fake_data_source_factory):
    """Scenario C: a raised fault becomes Error(exception=fault) and is not re-raised."""
    fault = TransportConnectionError("https://newsapi.org/v2/top-headlines", OSError("network unreachable"))
    repository = NewsRepository(fake_data_source_factory(fault))

    states = run_sequence(repository.get_headlines("fr"))

    assert len(states) == 2
    assert states[0] == Loading()
    assert isinstance(states[1], Error)
    assert states[1].error is None
    assert states[1].exception is fault
    assert states[1].is_fault


def test_success_status_without_body_is_error(fake_data_source_factory):
    repository = NewsRepository(fake_data_source_factory(ApiResponse(status=200, body=None)))

    states = run_sequence(repository.get_headlines("us"))

    assert states == [Loading(), Error(error=None, exception=None)]


def test_failed_status_with_body_carries_body_as_error(fake_data_source_factory):
    body = NewsResponse(status="error", message="Your API key is invalid.")
    repository = NewsRepository(fake_data_source_factory(ApiResponse(status=401, body=body)))

    states = run_sequence(repository.search_articles("bitcoin"))

    assert states == [Loading(), Error(error=body)]
    assert states[1].exception is None
    assert states[1].describe() == "Your API key is invalid."


def test_payload_fault_is_reported_as_exception(fake_data_source_factory):
    fault = PayloadParseError("https://newsapi.org/v2/everything", ValueError("Expecting value"))
    repository = NewsRepository(fake_data_source_factory(fault))

    states = run_sequence(repository.search_articles("bitcoin"))

    assert [state.kind for state in states] == [StateKind.LOADING, StateKind.ERROR]
    assert states[1].exception is fault


@pytest.mark.parametrize("outcome", [
    ApiResponse(status=200, body=NewsResponse(status="ok")),
    ApiResponse(status=204, body=None),
    ApiResponse(status=429, body=NewsResponse(status="error", message="rate limited")),
    ApiResponse(status=503, body=None),
    RuntimeError("boom"),
])
def test_every_sequence_is_loading_then_one_terminal_state(fake_data_source_factory, outcome):
    repository = NewsRepository(fake_data_source_factory(outcome))

    states = run_sequence(repository.get_headlines("us"))

    assert len(states) == 2
    assert isinstance(states[0], Loading)
    assert states[1].is_terminal


def test_sequence_is_cold_until_iterated(fake_data_source_factory, sample_response):
    data_source = fake_data_source_factory(ApiResponse(status=200, body=sample_response))
    repository = NewsRepository(data_source)

    sequence = repository.get_headlines("us")
    assert data_source.calls == []

    async def first_emission():
        state = await sequence.__anext__()
        calls_after_loading = list(data_source.calls)
        await sequence.aclose()
        return state, calls_after_loading

    state, calls_after_loading = asyncio.run(first_emission())

    assert state == Loading()
    assert calls_after_loading == []
    assert data_source.calls == []


def test_each_invocation_performs_a_new_request(fake_data_source_factory, sample_response):
    data_source = fake_data_source_factory(ApiResponse(status=200, body=sample_response))
    repository = NewsRepository(data_source)

    first = run_sequence(repository.get_headlines("us"))
    second = run_sequence(repository.get_headlines("us"))

    assert first == second
    assert len(data_source.calls) == 2


def test_concurrent_calls_are_not_deduplicated(fake_data_source_factory, sample_response):
    data_source = fake_data_source_factory(ApiResponse(status=200, body=sample_response))
    repository = NewsRepository(data_source)

    async def both():
        return await asyncio.gather(
            collect(repository.search_articles("bitcoin")),
            collect(repository.search_articles("bitcoin")),
        )

    first, second = asyncio.run(both())

    assert first == second == [Loading(), Success(sample_response)]
    assert data_source.calls == [
        {"operation": "search", "query": "bitcoin"},
        {"operation": "search", "query": "bitcoin"},
    ]


def test_consumer_cancellation_reaches_pending_call(fake_data_source_factory):
    data_source = fake_data_source_factory(block=True)
    repository = NewsRepository(data_source)
    received = []

    async def consume():
        async for state in repository.get_headlines("us"):
            received.append(state)

    async def scenario():
        task = asyncio.create_task(consume())
        await data_source.started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())

    assert data_source.cancelled
    assert received == [Loading()]


def test_cancellation_raised_by_call_is_isolated(fake_data_source_factory):
    fault = asyncio.CancelledError("call cancelled")
    repository = NewsRepository(fake_data_source_factory(fault))

    states = run_sequence(repository.get_headlines("us"))

    assert states[0] == Loading()
    assert isinstance(states[1], Error)
    assert states[1].exception is fault
    assert states[1].error is None


def test_outcome_is_logged(fake_data_source_factory, caplog):
    caplog.set_level("INFO", logger="newsline.core.repository")
    repository = NewsRepository(fake_data_source_factory(ApiResponse(status=500, body=None)))

    run_sequence(repository.get_headlines("de"))

    assert "headlines country=de failed with HTTP 500" in caplog.text
