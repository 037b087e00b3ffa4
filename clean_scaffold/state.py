"""Feature state union.

The generated ``<feature>_state.dart`` file declares a sealed state class
with four variants. This module is the single definition of that variant set:

* ``variant_table`` lists the variants in declaration order and is what the
  state template iterates over.
* ``Initial`` / ``Loading`` / ``Success`` / ``Error`` model the same union in
  Python, with ``match`` as the one exhaustive dispatch and ``maybe_match`` /
  ``match_or_none`` derived from it, mirroring the generated ``when`` /
  ``maybeWhen`` / ``whenOrNull``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from clean_scaffold.utils import to_camel

E = TypeVar("E")
T = TypeVar("T")


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Initial:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success(Generic[E]):
    payload: E


@dataclass(frozen=True)
class Error:
    message: str


FeatureState = Union[Initial, Loading, Success[Any], Error]


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def match(
    state: FeatureState,
    *,
    initial: Callable[[], T],
    loading: Callable[[], T],
    success: Callable[[Any], T],
    error: Callable[[str], T],
) -> T:
    """Call exactly one handler for *state* and return its result.

    ``success`` receives the payload and ``error`` the message.

    Raises:
        TypeError: If *state* is not one of the four variants.
    """
    if isinstance(state, Initial):
        return initial()
    if isinstance(state, Loading):
        return loading()
    if isinstance(state, Success):
        return success(state.payload)
    if isinstance(state, Error):
        return error(state.message)
    raise TypeError(f"Unknown feature state: {state!r}")


def maybe_match(
    state: FeatureState,
    *,
    initial: Callable[[], T] | None = None,
    loading: Callable[[], T] | None = None,
    success: Callable[[Any], T] | None = None,
    error: Callable[[str], T] | None = None,
    or_else: Callable[[], T],
) -> T:
    """Like :func:`match`, but any omitted handler falls back to *or_else*."""
    return match(
        state,
        initial=initial or or_else,
        loading=loading or or_else,
        success=success or (lambda _payload: or_else()),
        error=error or (lambda _message: or_else()),
    )


def match_or_none(
    state: FeatureState,
    *,
    initial: Callable[[], T] | None = None,
    loading: Callable[[], T] | None = None,
    success: Callable[[Any], T] | None = None,
    error: Callable[[str], T] | None = None,
) -> T | None:
    """:func:`maybe_match` with ``or_else`` returning ``None``."""
    return maybe_match(
        state,
        initial=initial,
        loading=loading,
        success=success,
        error=error,
        or_else=lambda: None,
    )


# ---------------------------------------------------------------------------
# Variant table for code generation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VariantSpec:
    """One generated state subclass: ``<Pascal><suffix>``."""

    suffix: str
    handler: str
    field: str | None = None
    field_type: str | None = None

    @property
    def has_payload(self) -> bool:
        return self.field is not None


def variant_table(pascal_name: str) -> list[VariantSpec]:
    """Return the state variants of a feature, in declaration order.

    The Success payload is the feature's domain entity, stored in a field
    named after it (``UserProfile`` -> ``userProfile``).
    """
    return [
        VariantSpec(suffix=Initial.__name__, handler="initial"),
        VariantSpec(suffix=Loading.__name__, handler="loading"),
        VariantSpec(
            suffix=Success.__name__,
            handler="success",
            field=to_camel(pascal_name),
            field_type=pascal_name,
        ),
        VariantSpec(
            suffix=Error.__name__,
            handler="error",
            field="message",
            field_type="String",
        ),
    ]
