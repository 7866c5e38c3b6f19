"""Exceptions raised by the middleware interface and helpers for reporting them."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")


class RmwError(Exception):
    """An unspecified middleware error."""


class InvalidArgumentError(RmwError, ValueError):
    """An argument given to a middleware function is not acceptable."""


class BadAllocError(RmwError):
    """Storage needed by a middleware function could not be obtained."""


class IncorrectRmwImplementationError(RmwError):
    """An entity was created by a different middleware implementation."""


def check_type_identifiers_match(
    element_name: str, element_type_id: Any, expected_type_id: Any
) -> None:
    """Raise if an entity's implementation identifier is not the expected one."""
    if element_type_id != expected_type_id:
        raise IncorrectRmwImplementationError(
            f"{element_name} implementation '{element_type_id}'"
            f"({id(element_type_id):#x}) does not match rmw implementation "
            f"'{expected_type_id}'({id(expected_type_id):#x})"
        )


def demangle(instance: Any) -> str:
    """Return the readable, qualified name of the type of ``instance``."""
    cls = type(instance)
    module = cls.__module__
    if module in (None, "builtins"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def try_construct(
    type_name: str, factory: Callable[..., T], *args: Any, **kwargs: Any
) -> T:
    """Build an object with ``factory``, turning a failure into an ``RmwError``."""
    try:
        return factory(*args, **kwargs)
    except Exception as exc:
        raise RmwError(
            f"caught exception {demangle(exc)} constructing {type_name}: {exc}"
        ) from exc


def try_destroy(type_name: str, action: Callable[[], T]) -> T:
    """Run a teardown ``action``, turning a failure into an ``RmwError``."""
    try:
        return action()
    except Exception as exc:
        raise RmwError(
            f"caught exception in destructor of {type_name}: {demangle(exc)}: {exc}"
        ) from exc