"""Exemplo: usar a camada de serviços sem passar pelo Flask.

Configura um padrão 5x2, marca um período de férias e imprime o resumo do mês.
"""

from src.escalaflex.escalaflex.container import build_container
from src.escalaflex.escalaflex.storage.memory_store import InMemoryStore


def main():
    container = build_container(store=InMemoryStore())
    container.pattern_service.save_pattern(work=5, off=2, cycle_start="2024-01-01")
    container.override_service.add_vacation("2024-01-08", "2024-01-12")

    view = container.calendar_service.month_view(2024, 1)
    for day in view.days:
        marker = "*" if day.is_overridden else " "
        print(f"{day.date:%d/%m} {marker} {day.type.value}")
    print({t.value: n for t, n in view.summary.items()})


if __name__ == "__main__":
    main()
