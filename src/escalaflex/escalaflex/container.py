from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .core.enums import StorageBackend
from .database.connection import DBConfig, DatabaseConnection
from .overrides.repository import OverrideRepository
from .overrides.service import OverrideService
from .patterns.repository import PatternRepository
from .patterns.service import PatternService
from .schedule.service import CalendarService
from .storage.json_file_store import JsonFileStore
from .storage.memory_store import InMemoryStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.repository import KeyValueStore
from .suggestions.client import OpenAISuggestionClient, SuggestionClient
from .suggestions.service import SuggestionService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    patterns_repo: PatternRepository
    overrides_repo: OverrideRepository

    pattern_service: PatternService
    override_service: OverrideService
    calendar_service: CalendarService
    suggestion_service: SuggestionService


def build_store(settings: Any) -> KeyValueStore:
    backend = StorageBackend(str(getattr(settings, "STORAGE_BACKEND", "json")).lower())
    if backend == StorageBackend.MEMORY:
        return InMemoryStore()
    if backend == StorageBackend.MYSQL:
        store = MySQLKeyValueStore(DatabaseConnection(DBConfig.from_dict(settings.DB_CONFIG)))
        if getattr(settings, "AUTO_INIT_DB", False):
            store.ensure_schema()
        return store
    return JsonFileStore(Path(getattr(settings, "STORAGE_PATH", "escalaflex.json")))


def build_suggestion_client(settings: Any) -> Optional[SuggestionClient]:
    api_key = getattr(settings, "OPENAI_API_KEY", None)
    if not api_key:
        return None
    return OpenAISuggestionClient(
        api_key=api_key,
        model=getattr(settings, "OPENAI_MODEL", "gpt-4o-mini"),
        timeout=float(getattr(settings, "OPENAI_TIMEOUT", 30.0)),
    )


def build_container(
    *,
    store: KeyValueStore,
    suggestion_client: Optional[SuggestionClient] = None,
) -> Container:
    patterns_repo = PatternRepository(store)
    overrides_repo = OverrideRepository(store)

    pattern_service = PatternService(patterns_repo, overrides_repo)
    override_service = OverrideService(overrides_repo)
    calendar_service = CalendarService(pattern_service, override_service)
    suggestion_service = SuggestionService(pattern_service, override_service, suggestion_client)

    return Container(
        store=store,
        patterns_repo=patterns_repo,
        overrides_repo=overrides_repo,
        pattern_service=pattern_service,
        override_service=override_service,
        calendar_service=calendar_service,
        suggestion_service=suggestion_service,
    )


def build_container_from_settings(settings: Any) -> Container:
    return build_container(
        store=build_store(settings),
        suggestion_client=build_suggestion_client(settings),
    )
