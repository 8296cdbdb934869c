"""Types shared by the dispatch engine."""

from __future__ import annotations

from typing import Any, Callable, Generic, Hashable, Mapping, NamedTuple, TypeVar

R = TypeVar("R")

CaseName = Hashable
Handler = Callable[[], R]
Classifier = Callable[[Any], CaseName]
DispatchTable = Mapping[CaseName, Callable[[], Any]]


class Registration(NamedTuple, Generic[R]):
    """One case name paired with the handler run when that case is computed."""

    case_name: CaseName
    handler: Callable[[], R]
