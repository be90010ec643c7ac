from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from ..common.datetime_utils import parse_iso_date
from ..core.constants import DISPLAY_DATE_FORMAT
from ..core.exceptions import (
    SuggestionError,
    SuggestionInProgressError,
    SuggestionNotConfiguredError,
    ValidationError,
)
from ..overrides.model import Overrides
from ..overrides.service import OverrideService
from ..patterns.model import ShiftPattern
from ..patterns.service import PatternService
from .client import SuggestionClient
from .model import SuggestionRequest, SuggestionResult

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Ocorreu um erro ao contatar a IA. Tente novamente mais tarde."


def describe_pattern(pattern: ShiftPattern) -> str:
    return (
        f"Padrão atual: {pattern.work_days} dias de trabalho por {pattern.off_days} dias de folga. "
        f"O ciclo começou em {pattern.cycle_start.strftime(DISPLAY_DATE_FORMAT)}."
    )


def describe_overrides(overrides: Overrides) -> str:
    lines = []
    for key in sorted(overrides):
        ov = overrides[key]
        day = parse_iso_date(key).strftime(DISPLAY_DATE_FORMAT)
        lines.append(f"- {day}: alterado para {ov.type.value}. Anotação: {ov.note or 'N/A'}")
    return "\n".join(lines)


class SuggestionService:
    """Asks the AI for a revised pattern. At most one request runs at a time.

    The result is advisory: nothing here writes the pattern or the overrides.
    """

    def __init__(
        self,
        patterns: PatternService,
        overrides: OverrideService,
        client: Optional[SuggestionClient],
    ):
        self._patterns = patterns
        self._overrides = overrides
        self._client = client
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def build_request(
        self,
        *,
        preferences: Optional[str] = None,
        conflict: Optional[str] = None,
    ) -> SuggestionRequest:
        pattern = self._patterns.require_pattern()
        overrides = self._overrides.snapshot()
        if not overrides:
            raise ValidationError("Faça algumas edições na sua escala antes de pedir uma otimização.")

        return SuggestionRequest(
            original_pattern_description=describe_pattern(pattern),
            edited_schedule_description=describe_overrides(overrides),
            user_preferences=(preferences or "").strip() or None,
            conflict_description=(conflict or "").strip() or None,
        )

    async def suggest(
        self,
        *,
        preferences: Optional[str] = None,
        conflict: Optional[str] = None,
    ) -> SuggestionResult:
        if self._client is None:
            raise SuggestionNotConfiguredError("A otimização com IA não está configurada.")
        request = self.build_request(preferences=preferences, conflict=conflict)

        if not self._in_flight.acquire(blocking=False):
            raise SuggestionInProgressError("Já existe uma análise em andamento.")
        try:
            result = await self._client.suggest(request)
        except PydanticValidationError as e:
            logger.exception("AI returned an invalid suggestion")
            raise SuggestionError("A IA retornou uma resposta inválida.") from e
        except Exception as e:
            logger.exception("AI suggestion request failed")
            raise SuggestionError(GENERIC_ERROR) from e
        finally:
            self._in_flight.release()

        logger.info(
            "suggestion received (new pattern: %s)",
            f"{result.new_pattern.work}/{result.new_pattern.off}" if result.new_pattern else "none",
        )
        return result
