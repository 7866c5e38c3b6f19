"""Quality of service policy kinds and their string forms."""

from __future__ import annotations

import enum
from typing import Optional, TypeVar

from rmwkit.errors import InvalidArgumentError

E = TypeVar("E", bound=enum.Enum)


class QosPolicyKind(enum.IntEnum):
    """Kinds of quality of service policy, as distinct bit flags."""

    INVALID = 1 << 0
    DURABILITY = 1 << 1
    DEADLINE = 1 << 2
    LIVELINESS = 1 << 3
    RELIABILITY = 1 << 4
    HISTORY = 1 << 5
    LIFESPAN = 1 << 6
    DEPTH = 1 << 7
    LIVELINESS_LEASE_DURATION = 1 << 8
    AVOID_ROS_NAMESPACE_CONVENTIONS = 1 << 9


class DurabilityPolicy(enum.Enum):
    """Durability policy values."""

    SYSTEM_DEFAULT = enum.auto()
    TRANSIENT_LOCAL = enum.auto()
    VOLATILE = enum.auto()
    UNKNOWN = enum.auto()
    BEST_AVAILABLE = enum.auto()


class HistoryPolicy(enum.Enum):
    """History policy values."""

    SYSTEM_DEFAULT = enum.auto()
    KEEP_LAST = enum.auto()
    KEEP_ALL = enum.auto()
    UNKNOWN = enum.auto()


class LivelinessPolicy(enum.Enum):
    """Liveliness policy values."""

    SYSTEM_DEFAULT = enum.auto()
    AUTOMATIC = enum.auto()
    MANUAL_BY_TOPIC = enum.auto()
    UNKNOWN = enum.auto()
    BEST_AVAILABLE = enum.auto()


class ReliabilityPolicy(enum.Enum):
    """Reliability policy values."""

    SYSTEM_DEFAULT = enum.auto()
    RELIABLE = enum.auto()
    BEST_EFFORT = enum.auto()
    UNKNOWN = enum.auto()
    BEST_AVAILABLE = enum.auto()


_KIND_NAMES = {
    QosPolicyKind.DURABILITY: "durability",
    QosPolicyKind.DEADLINE: "deadline",
    QosPolicyKind.LIVELINESS: "liveliness",
    QosPolicyKind.RELIABILITY: "reliability",
    QosPolicyKind.HISTORY: "history",
    QosPolicyKind.LIFESPAN: "lifespan",
    QosPolicyKind.DEPTH: "depth",
    QosPolicyKind.LIVELINESS_LEASE_DURATION: "liveliness_lease_duration",
    QosPolicyKind.AVOID_ROS_NAMESPACE_CONVENTIONS: "avoid_ros_namespace_conventions",
}

_DURABILITY_NAMES = {
    DurabilityPolicy.SYSTEM_DEFAULT: "system_default",
    DurabilityPolicy.TRANSIENT_LOCAL: "transient_local",
    DurabilityPolicy.VOLATILE: "volatile",
    DurabilityPolicy.BEST_AVAILABLE: "best_available",
}

_HISTORY_NAMES = {
    HistoryPolicy.SYSTEM_DEFAULT: "system_default",
    HistoryPolicy.KEEP_LAST: "keep_last",
    HistoryPolicy.KEEP_ALL: "keep_all",
}

_LIVELINESS_NAMES = {
    LivelinessPolicy.SYSTEM_DEFAULT: "system_default",
    LivelinessPolicy.AUTOMATIC: "automatic",
    LivelinessPolicy.MANUAL_BY_TOPIC: "manual_by_topic",
    LivelinessPolicy.BEST_AVAILABLE: "best_available",
}

_RELIABILITY_NAMES = {
    ReliabilityPolicy.SYSTEM_DEFAULT: "system_default",
    ReliabilityPolicy.RELIABLE: "reliable",
    ReliabilityPolicy.BEST_EFFORT: "best_effort",
    ReliabilityPolicy.BEST_AVAILABLE: "best_available",
}


def _reverse(names: dict[E, str]) -> dict[str, E]:
    return {text: member for member, text in names.items()}


_KIND_VALUES = _reverse(_KIND_NAMES)
_DURABILITY_VALUES = _reverse(_DURABILITY_NAMES)
_HISTORY_VALUES = _reverse(_HISTORY_NAMES)
_LIVELINESS_VALUES = _reverse(_LIVELINESS_NAMES)
_RELIABILITY_VALUES = _reverse(_RELIABILITY_NAMES)


def _lookup(text: Optional[str], values: dict[str, E], fallback: E) -> E:
    if text is None:
        raise InvalidArgumentError("text argument is null")
    return values.get(text, fallback)


def qos_policy_kind_to_str(kind: QosPolicyKind) -> Optional[str]:
    """Return the name of a policy kind, or None if it has none."""
    return _KIND_NAMES.get(kind)


def qos_policy_kind_from_str(text: str) -> QosPolicyKind:
    """Return the policy kind named by ``text``, or ``INVALID``."""
    return _lookup(text, _KIND_VALUES, QosPolicyKind.INVALID)


def durability_policy_to_str(value: DurabilityPolicy) -> Optional[str]:
    """Return the name of a durability policy, or None if it has none."""
    return _DURABILITY_NAMES.get(value)


def durability_policy_from_str(text: str) -> DurabilityPolicy:
    """Return the durability policy named by ``text``, or ``UNKNOWN``."""
    return _lookup(text, _DURABILITY_VALUES, DurabilityPolicy.UNKNOWN)


def history_policy_to_str(value: HistoryPolicy) -> Optional[str]:
    """Return the name of a history policy, or None if it has none."""
    return _HISTORY_NAMES.get(value)


def history_policy_from_str(text: str) -> HistoryPolicy:
    """Return the history policy named by ``text``, or ``UNKNOWN``."""
    return _lookup(text, _HISTORY_VALUES, HistoryPolicy.UNKNOWN)


def liveliness_policy_to_str(value: LivelinessPolicy) -> Optional[str]:
    """Return the name of a liveliness policy, or None if it has none."""
    return _LIVELINESS_NAMES.get(value)


def liveliness_policy_from_str(text: str) -> LivelinessPolicy:
    """Return the liveliness policy named by ``text``, or ``UNKNOWN``."""
    return _lookup(text, _LIVELINESS_VALUES, LivelinessPolicy.UNKNOWN)


def reliability_policy_to_str(value: ReliabilityPolicy) -> Optional[str]:
    """Return the name of a reliability policy, or None if it has none."""
    return _RELIABILITY_NAMES.get(value)


def reliability_policy_from_str(text: str) -> ReliabilityPolicy:
    """Return the reliability policy named by ``text``, or ``UNKNOWN``."""
    return _lookup(text, _RELIABILITY_VALUES, ReliabilityPolicy.UNKNOWN)