"""Keyed dispatch: build a case table, classify the input, run one handler."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import Any, Callable

from .constants import (
    EVENT_CASE_OVERRIDDEN,
    EVENT_CASE_RESOLVED,
    EVENT_CASE_UNMATCHED,
    EVENT_TABLE_BUILT,
)
from .errors import MalformedRegistrationsError, UnmatchedCaseError
from .logging_utils import describe_callable, log_event
from .models import CaseName, Classifier, DispatchTable, Handler, R, Registration


def on(case_name: CaseName, handler: Handler[R]) -> Registration[R]:
    """Pair a case name with the handler to run when that case is computed."""
    if not callable(handler):
        raise TypeError(f"Handler for case {case_name!r} is not callable: {handler!r}")
    return Registration(case_name, handler)


pair = on


def _is_pair(item: Any) -> bool:
    # Registration is a tuple too. Two-item tuples are never flat case names.
    return isinstance(item, (tuple, list)) and len(item) == 2


def _iter_registrations(registrations: Iterable[Any]) -> Iterable[tuple[CaseName, Any]]:
    """Yield (case_name, handler) from pairs and the flat name/handler form."""
    items = iter(registrations)
    for item in items:
        if _is_pair(item):
            yield item[0], item[1]
            continue
        # Flat form: this item is a case name and the next one is its handler.
        try:
            handler = next(items)
        except StopIteration:
            raise MalformedRegistrationsError(
                f"Case {item!r} has no handler (odd number of registration items)."
            ) from None
        yield item, handler


def build_table(registrations: Iterable[Any]) -> DispatchTable:
    """Build a read-only dispatch table from a registration sequence.

    Accepts ``on(...)`` registrations, ``(name, handler)`` tuples or lists, and
    the flat ``name, handler, name, handler`` form, in any mix. A two-item
    tuple is always read as a pair; register tuple-valued case names with
    ``on``. Later registrations of the same case name replace earlier ones.
    """
    table: dict[CaseName, Callable[[], Any]] = {}
    count = 0

    for case_name, handler in _iter_registrations(registrations):
        count += 1
        if not callable(handler):
            raise MalformedRegistrationsError(
                f"Handler for case {case_name!r} is not callable: {handler!r}"
            )
        try:
            previous = table.get(case_name)
        except TypeError as exc:
            raise MalformedRegistrationsError(
                f"Case name {case_name!r} is not hashable."
            ) from exc
        if previous is not None:
            log_event(
                EVENT_CASE_OVERRIDDEN,
                case_name=case_name,
                previous_handler=describe_callable(previous),
                handler=describe_callable(handler),
            )
        table[case_name] = handler

    log_event(EVENT_TABLE_BUILT, case_count=len(table), registration_count=count)
    return MappingProxyType(table)


def resolve(table: DispatchTable, classifier: Classifier, input_value: Any) -> Any:
    """Classify input_value and return the result of the matching handler.

    Exceptions raised by the classifier or the handler propagate unchanged.
    """
    case_name = classifier(input_value)

    try:
        handler = table[case_name]
    except (KeyError, TypeError):
        log_event(EVENT_CASE_UNMATCHED, case_name=case_name, known_cases=list(table))
        raise UnmatchedCaseError(case_name) from None

    log_event(EVENT_CASE_RESOLVED, case_name=case_name, handler=describe_callable(handler))
    return handler()


def build_and_resolve(
    classifier: Classifier, input_value: Any, registrations: Iterable[Any]
) -> Any:
    """Build a fresh table from registrations, then resolve input_value against it."""
    table = build_table(registrations)
    return resolve(table, classifier, input_value)


def dispatch(classifier: Classifier, input_value: Any, *registrations: Any) -> Any:
    """Variadic form of build_and_resolve.

    Usage::

        dispatch(
            lambda n: "low" if n < 3 else "high",
            value,
            on("low", lambda: ...),
            on("high", lambda: ...),
        )
    """
    return build_and_resolve(classifier, input_value, registrations)
