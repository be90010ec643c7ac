from __future__ import annotations

from enum import Enum


class ShiftType(str, Enum):
    """Classificação de um dia; o valor é o rótulo persistido."""

    WORK = "Trabalho"
    OFF = "Folga"
    SWAP = "Troca"
    VACATION = "Férias"
    OTHER = "Outro"


class StorageBackend(str, Enum):
    """Backends disponíveis para o armazenamento chave-valor."""

    MEMORY = "memory"
    JSON = "json"
    MYSQL = "mysql"
