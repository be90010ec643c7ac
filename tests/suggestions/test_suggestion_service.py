from __future__ import annotations

import asyncio
from datetime import date

import pytest

from src.escalaflex.escalaflex.container import build_container
from src.escalaflex.escalaflex.core.enums import ShiftType
from src.escalaflex.escalaflex.core.exceptions import (
    NotConfiguredError,
    StorageError,
    SuggestionError,
    SuggestionInProgressError,
    SuggestionNotConfiguredError,
    ValidationError,
)
from src.escalaflex.escalaflex.overrides.model import Override
from src.escalaflex.escalaflex.patterns.model import ShiftPattern
from src.escalaflex.escalaflex.storage.memory_store import InMemoryStore
from src.escalaflex.escalaflex.suggestions.model import SuggestionRequest, SuggestionResult
from src.escalaflex.escalaflex.suggestions.service import describe_overrides, describe_pattern

RESULT = SuggestionResult(
    suggested_adjustments="Trocar para 4x3",
    optimization_rationale="Menos edições nas sextas",
    new_pattern={"work": 4, "off": 3},
)


class FakeClient:
    def __init__(self, result=RESULT, error: Exception | None = None):
        self._result = result
        self._error = error
        self.requests: list[SuggestionRequest] = []

    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        self.requests.append(request)
        if self._error:
            raise self._error
        return self._result


class BlockingClient(FakeClient):
    def __init__(self):
        super().__init__()
        self.release = None

    async def suggest(self, request):
        self.requests.append(request)
        await self.release.wait()
        return self._result


def _container(client):
    c = build_container(store=InMemoryStore(), suggestion_client=client)
    c.pattern_service.save_pattern(work=5, off=2, cycle_start="2024-01-01")
    c.override_service.set_override("2024-01-05", shift_type=ShiftType.OFF, note="folga extra")
    c.override_service.set_override("2024-01-03", shift_type=ShiftType.VACATION)
    return c


def test_describe_pattern():
    text = describe_pattern(ShiftPattern(5, 2, date(2024, 1, 1)))
    assert text == "Padrão atual: 5 dias de trabalho por 2 dias de folga. O ciclo começou em 01/01/2024."


def test_describe_overrides_sorted_by_date():
    text = describe_overrides(
        {
            "2024-01-05": Override(ShiftType.OFF, "folga extra"),
            "2024-01-03": Override(ShiftType.VACATION),
        }
    )
    assert text.splitlines() == [
        "- 03/01/2024: alterado para Férias. Anotação: N/A",
        "- 05/01/2024: alterado para Folga. Anotação: folga extra",
    ]


def test_suggest_sends_descriptions():
    client = FakeClient()
    c = _container(client)

    result = asyncio.run(c.suggestion_service.suggest(preferences="  sem sábados ", conflict=None))

    assert result == RESULT
    sent = client.requests[0]
    assert sent.original_pattern_description.startswith("Padrão atual: 5 dias")
    assert "03/01/2024" in sent.edited_schedule_description
    assert sent.user_preferences == "sem sábados"
    assert sent.conflict_description is None


def test_suggestion_is_advisory_only():
    c = _container(FakeClient())
    before = (c.pattern_service.get_pattern(), c.override_service.snapshot())
    asyncio.run(c.suggestion_service.suggest())
    assert (c.pattern_service.get_pattern(), c.override_service.snapshot()) == before


def test_no_overrides_sends_nothing():
    client = FakeClient()
    c = build_container(store=InMemoryStore(), suggestion_client=client)
    c.pattern_service.save_pattern(work=5, off=2, cycle_start="2024-01-01")
    with pytest.raises(ValidationError):
        asyncio.run(c.suggestion_service.suggest())
    assert client.requests == []


def test_no_pattern():
    c = build_container(store=InMemoryStore(), suggestion_client=FakeClient())
    with pytest.raises(NotConfiguredError):
        asyncio.run(c.suggestion_service.suggest())


def test_no_client_configured():
    c = _container(None)
    with pytest.raises(SuggestionNotConfiguredError):
        asyncio.run(c.suggestion_service.suggest())


def test_corrupt_override_key_reported_before_request():
    client = FakeClient()
    c = _container(client)
    c.store.set("shiftOverrides", {"05/01/2024": {"type": "Folga"}})

    with pytest.raises(StorageError):
        asyncio.run(c.suggestion_service.suggest())
    assert client.requests == []
    assert c.suggestion_service.busy is False


def test_failure_leaves_state_untouched():
    c = _container(FakeClient(error=ConnectionError("offline")))
    before = (c.pattern_service.get_pattern(), c.override_service.snapshot())

    with pytest.raises(SuggestionError) as exc:
        asyncio.run(c.suggestion_service.suggest())

    assert "Tente novamente" in str(exc.value)
    assert (c.pattern_service.get_pattern(), c.override_service.snapshot()) == before
    assert c.suggestion_service.busy is False


def test_only_one_request_in_flight():
    client = BlockingClient()
    c = _container(client)

    async def scenario():
        client.release = asyncio.Event()
        first = asyncio.create_task(c.suggestion_service.suggest())
        await asyncio.sleep(0)
        assert c.suggestion_service.busy is True
        with pytest.raises(SuggestionInProgressError):
            await c.suggestion_service.suggest()
        client.release.set()
        return await first

    assert asyncio.run(scenario()) == RESULT
    assert len(client.requests) == 1
    assert c.suggestion_service.busy is False
