"""Timing spans for service calls.

``@traced`` wraps a service method in a root span and ``trace_span``
opens child spans for the phases inside it (walk, kosaraju, aggregate).
Spans are collected only after :func:`enable_telemetry`, which the CLI
calls for ``--verbose``; the finished tree lands in
``ServiceResult.meta["telemetry"]``.

Every traced call binds ``service_op`` into structlog's context, so log
lines emitted underneath it carry the operation name.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from budgetgraph.services.result import ServiceResult

log = structlog.get_logger("budgetgraph.telemetry")

_enabled: ContextVar[bool] = ContextVar("budgetgraph_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("budgetgraph_span", default=None)


@dataclass
class Span:
    """One timed phase of a service call."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def child(self, name: str) -> Span:
        span = Span(name=name, parent=self)
        self.children.append(span)
        return span

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            data["annotations"] = self.annotations
        if self.children:
            data["children"] = [c.to_dict() for c in self.children]
        return data


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Open a child span under the active one.

    Yields None when telemetry is off or no traced call is running, so
    callers guard annotations with ``if span:``.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    span = parent.child(name)
    token = _active.set(span)
    try:
        yield span
    finally:
        span.end()
        _active.reset(token)


_P = ParamSpec("_P")
_R = TypeVar("_R")


def _run_in_span(func: Callable[_P, _R], *args: _P.args, **kwargs: _P.kwargs) -> _R:
    span = Span(name=func.__qualname__)
    token = _active.set(span)
    ok = False
    try:
        result = func(*args, **kwargs)
        ok = result.ok if isinstance(result, ServiceResult) else True
    finally:
        span.end()
        _active.reset(token)
        log.debug(
            "span.complete",
            span_name=span.name,
            duration_ms=round(span.duration_ms, 2),
            ok=ok,
            children=len(span.children),
        )

    if isinstance(result, ServiceResult):
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
    return result


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Decorator for service methods returning ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        with structlog.contextvars.bound_contextvars(service_op=func.__qualname__):
            if not _enabled.get():
                return func(*args, **kwargs)
            return _run_in_span(func, *args, **kwargs)

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The innermost open span, for ad-hoc annotation."""
    return _active.get() if _enabled.get() else None
