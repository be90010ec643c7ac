"""Prompt sent to the text-generation service (answers in pt-BR)."""

from __future__ import annotations

import json

from .model import SuggestionRequest, SuggestionResult

SYSTEM_PROMPT = (
    "Você é um assistente de IA que ajuda os usuários a otimizar suas escalas de trabalho.\n\n"
    "Você receberá o padrão de escala original do usuário e sua escala editada, que contém "
    "edições manuais feitas pelo usuário.\n\n"
    "Sua tarefa é analisar a escala editada e sugerir um novo padrão de escala no formato "
    "{ work: number, off: number }. Você também deve fornecer uma justificativa para a sua sugestão.\n\n"
    "Se houver uma descrição de conflito, sua tarefa é sugerir até 3 opções de resolução para o "
    "conflito, no formato de frases curtas e acionáveis, além de um novo padrão de escala e justificativa.\n\n"
    "Considere quaisquer preferências ou restrições do usuário fornecidas. "
    "Responda em Português (Brasil)."
)

USER_TEMPLATE = """Padrão de Escala Original: {original}
Escala Editada: {edited}
Preferências do Usuário: {preferences}
Descrição do Conflito: {conflict}

Sugira um novo padrão de escala e explique a lógica para esses ajustes, focando em como eles \
minimizam interrupções e se adaptam melhor às necessidades do usuário. Se houver um conflito, \
forneça até 3 opções de resolução.

Responda estritamente com um JSON válido seguindo este schema:
{schema}"""


def build_messages(request: SuggestionRequest) -> list[dict[str, str]]:
    schema = json.dumps(SuggestionResult.model_json_schema(by_alias=True), ensure_ascii=False)
    user_prompt = USER_TEMPLATE.format(
        original=request.original_pattern_description,
        edited=request.edited_schedule_description,
        preferences=request.user_preferences or "",
        conflict=request.conflict_description or "",
        schema=schema,
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]
