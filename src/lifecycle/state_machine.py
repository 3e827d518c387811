"""Lifecycle State Machine — table-driven валидация переходов статусов.

Одна реализация для заказов и партий: машина параметризуется enum'ом
статусов и таблицей переходов.

Таблица переходов:
- Каждый статус enum обязан иметь запись (пустой набор = terminal)
- Каждый целевой статус обязан быть членом того же enum
- Таблица проверяется при создании машины (при импорте модуля) и далее
  доступна только на чтение: MappingProxyType + frozenset

Неявных переходов нет: DRAFT → RELEASED запрещён, даже если RELEASED
"дальше" по процессу.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Generic, Iterable, Mapping, TypeVar, Union

from src.core.errors import InvalidTransition

logger = logging.getLogger(__name__)

StatusT = TypeVar("StatusT", bound=Enum)


@dataclass(frozen=True)
class TransitionResult(Generic[StatusT]):
    """Результат проверки перехода статуса."""

    allowed: bool
    current_status: StatusT
    requested_status: StatusT
    allowed_statuses: frozenset

    # Диагностика
    reason: str


class LifecycleStateMachine(Generic[StatusT]):
    """
    Конечный автомат над enum статусов с фиксированной таблицей переходов.

    Машина stateless: текущий статус хранит вызывающий (запись в БД),
    машина только отвечает "разрешён ли X → Y". Защита read-modify-write
    статуса от конкурентных запросов — на стороне сервиса персистентности.
    """

    def __init__(
        self,
        name: str,
        status_type: type,
        transitions: Mapping[StatusT, Iterable[StatusT]],
        initial_status: StatusT,
    ):
        """
        Args:
            name: Имя жизненного цикла (для сообщений об ошибках: "order", "batch")
            status_type: Enum статусов
            transitions: Статус → статусы, достижимые напрямую
            initial_status: Начальный статус

        Raises:
            ValueError: если таблица не покрывает все статусы enum или
                ссылается на статусы вне enum
        """
        self.name = name
        self.status_type = status_type

        # str-enum'ы разных типов равны по значению: проверка через isinstance
        table = {}
        for source, targets in transitions.items():
            if not isinstance(source, status_type):
                raise ValueError(f"{name} transition table has unknown status {source!r}")
            targets = frozenset(targets)
            unknown = [t for t in targets if not isinstance(t, status_type)]
            if unknown:
                raise ValueError(
                    f"{name} transition table: {source.value} → unknown statuses {unknown!r}"
                )
            table[source] = targets

        missing = [s for s in status_type if s not in table]
        if missing:
            raise ValueError(
                f"{name} transition table is missing statuses: "
                f"{sorted(s.value for s in missing)}"
            )

        if not isinstance(initial_status, status_type):
            raise ValueError(f"{name} initial status {initial_status!r} is not a {status_type.__name__}")

        self._transitions: Mapping[StatusT, frozenset] = MappingProxyType(table)
        self.initial_status = initial_status

    # -------------------------------------------------------------------------
    # Таблица
    # -------------------------------------------------------------------------

    @property
    def transitions(self) -> Mapping[StatusT, frozenset]:
        """Read-only таблица переходов."""
        return self._transitions

    @property
    def terminal_statuses(self) -> frozenset:
        """Статусы без исходящих переходов."""
        return frozenset(s for s, targets in self._transitions.items() if not targets)

    def is_terminal(self, status: Union[StatusT, str]) -> bool:
        return not self._transitions[self._coerce(status)]

    # -------------------------------------------------------------------------
    # Проверки переходов
    # -------------------------------------------------------------------------

    def can_transition(
        self, current: Union[StatusT, str], requested: Union[StatusT, str]
    ) -> bool:
        """True если requested есть в transitions[current]."""
        return self._coerce(requested) in self._transitions[self._coerce(current)]

    def next_allowed_statuses(self, current: Union[StatusT, str]) -> frozenset:
        """Статусы, достижимые напрямую из current (пусто для terminal)."""
        return self._transitions[self._coerce(current)]

    def evaluate_transition(
        self, current: Union[StatusT, str], requested: Union[StatusT, str]
    ) -> TransitionResult:
        """
        Проверка перехода с диагностикой.

        Returns:
            TransitionResult с allowed и набором разрешённых статусов
        """
        current = self._coerce(current)
        requested = self._coerce(requested)
        allowed_statuses = self._transitions[current]

        if requested in allowed_statuses:
            reason = "allowed"
        elif not allowed_statuses:
            reason = "terminal_status"
        else:
            reason = "not_in_transition_table"

        allowed = requested in allowed_statuses
        if not allowed:
            logger.debug(
                "Rejected %s transition %s → %s (%s), allowed: %s",
                self.name,
                current.value,
                requested.value,
                reason,
                sorted(s.value for s in allowed_statuses),
            )

        return TransitionResult(
            allowed=allowed,
            current_status=current,
            requested_status=requested,
            allowed_statuses=allowed_statuses,
            reason=reason,
        )

    def require_transition(
        self, current: Union[StatusT, str], requested: Union[StatusT, str]
    ) -> StatusT:
        """
        Возвращает requested, если переход разрешён.

        Raises:
            InvalidTransition: если перехода нет в таблице
        """
        result = self.evaluate_transition(current, requested)
        if not result.allowed:
            raise InvalidTransition(
                self.name,
                result.current_status,
                result.requested_status,
                result.allowed_statuses,
            )
        return result.requested_status

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _coerce(self, status: Union[StatusT, str]) -> StatusT:
        """
        Приведение к enum статусов машины.

        Raises:
            TypeError: если передан член другого enum (например BatchStatus в order)
            ValueError: если строка не является статусом
        """
        if isinstance(status, self.status_type):
            return status
        if isinstance(status, Enum):
            raise TypeError(
                f"{self.name} lifecycle expects {self.status_type.__name__}, "
                f"got {type(status).__name__}.{status.name}"
            )
        return self.status_type(status)
