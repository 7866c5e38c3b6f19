"""Validation of fully qualified topic names and of node names."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Optional, Union

from rmwkit.errors import InvalidArgumentError

DEFAULT_DOMAIN_ID = 2**64 - 1
"""Domain id meaning "use the default domain"."""

TOPIC_MAX_NAME_LENGTH = 255 - 8
"""Longest allowed topic name; eight characters are kept for prefixes."""

NODE_NAME_MAX_NAME_LENGTH = 255
"""Longest allowed node name."""

_ALNUM = frozenset(string.ascii_letters + string.digits)
_NODE_CHARS = _ALNUM | {"_"}
_TOPIC_CHARS = _NODE_CHARS | {"/"}
_DIGITS = frozenset(string.digits)


class TopicValidation(enum.IntEnum):
    """Outcome of checking a fully qualified topic name."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_NOT_ABSOLUTE = 2
    INVALID_ENDS_WITH_FORWARD_SLASH = 3
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 4
    INVALID_CONTAINS_REPEATED_FORWARD_SLASH = 5
    INVALID_NAME_TOKEN_STARTS_WITH_NUMBER = 6
    INVALID_TOO_LONG = 7


class NodeNameValidation(enum.IntEnum):
    """Outcome of checking a node name."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 2
    INVALID_STARTS_WITH_NUMBER = 3
    INVALID_TOO_LONG = 4


@dataclass(frozen=True)
class ValidationResult:
    """A validation outcome and, when invalid, the index of the offending character."""

    result: Union[TopicValidation, NodeNameValidation]
    invalid_index: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return self.result == 0


_TOPIC_MESSAGES = {
    TopicValidation.INVALID_IS_EMPTY_STRING: "topic name must not be empty",
    TopicValidation.INVALID_NOT_ABSOLUTE:
        "topic name must be absolute, it must lead with a '/'",
    TopicValidation.INVALID_ENDS_WITH_FORWARD_SLASH: "topic name must not end with a '/'",
    TopicValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS:
        "topic name must not contain characters other than alphanumerics, '_', or '/'",
    TopicValidation.INVALID_CONTAINS_REPEATED_FORWARD_SLASH:
        "topic name must not contain repeated '/'",
    TopicValidation.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER:
        "topic name must not have a token that starts with a number",
    TopicValidation.INVALID_TOO_LONG:
        f"topic length should not exceed '{TOPIC_MAX_NAME_LENGTH}'",
}

_NODE_MESSAGES = {
    NodeNameValidation.INVALID_IS_EMPTY_STRING: "node name must not be empty",
    NodeNameValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS:
        "node name must not contain characters other than alphanumerics or '_'",
    NodeNameValidation.INVALID_STARTS_WITH_NUMBER: "node name must not start with a number",
    NodeNameValidation.INVALID_TOO_LONG:
        f"node name length should not exceed '{NODE_NAME_MAX_NAME_LENGTH}'",
}


def _require_str(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{what} must be a string")
    return value


def validate_full_topic_name(topic_name: str) -> ValidationResult:
    """Check a fully qualified topic name; the length limit is checked last."""
    name = _require_str(topic_name, "topic_name")
    invalid = lambda code, index: ValidationResult(code, index)  # noqa: E731

    if not name:
        return invalid(TopicValidation.INVALID_IS_EMPTY_STRING, 0)
    if name[0] != "/":
        return invalid(TopicValidation.INVALID_NOT_ABSOLUTE, 0)
    if name[-1] == "/":
        return invalid(TopicValidation.INVALID_ENDS_WITH_FORWARD_SLASH, len(name) - 1)
    for index, char in enumerate(name):
        if char not in _TOPIC_CHARS:
            return invalid(TopicValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, index)
    for index, (prev, char) in enumerate(zip(name, name[1:]), start=1):
        if prev == "/" and char == "/":
            return invalid(TopicValidation.INVALID_CONTAINS_REPEATED_FORWARD_SLASH, index)
    for index, (prev, char) in enumerate(zip(name, name[1:]), start=1):
        if prev == "/" and char in _DIGITS:
            return invalid(TopicValidation.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, index)
    if len(name) > TOPIC_MAX_NAME_LENGTH:
        return invalid(TopicValidation.INVALID_TOO_LONG, TOPIC_MAX_NAME_LENGTH - 1)
    return ValidationResult(TopicValidation.VALID)


def validate_node_name(node_name: str) -> ValidationResult:
    """Check a node name; the length limit is checked last."""
    name = _require_str(node_name, "node_name")
    if not name:
        return ValidationResult(NodeNameValidation.INVALID_IS_EMPTY_STRING, 0)
    for index, char in enumerate(name):
        if char not in _NODE_CHARS:
            return ValidationResult(
                NodeNameValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, index
            )
    if name[0] in _DIGITS:
        return ValidationResult(NodeNameValidation.INVALID_STARTS_WITH_NUMBER, 0)
    if len(name) > NODE_NAME_MAX_NAME_LENGTH:
        return ValidationResult(
            NodeNameValidation.INVALID_TOO_LONG, NODE_NAME_MAX_NAME_LENGTH - 1
        )
    return ValidationResult(NodeNameValidation.VALID)


def _code(validation_result: Union[int, ValidationResult]) -> int:
    if isinstance(validation_result, ValidationResult):
        return int(validation_result.result)
    return int(validation_result)


def full_topic_name_validation_result_string(
    validation_result: Union[int, ValidationResult],
) -> Optional[str]:
    """Describe a topic validation result; None when the name is valid."""
    code = _code(validation_result)
    if code == TopicValidation.VALID:
        return None
    try:
        return _TOPIC_MESSAGES[TopicValidation(code)]
    except ValueError:
        return "unknown result code for rmw topic name validation"


def node_name_validation_result_string(
    validation_result: Union[int, ValidationResult],
) -> Optional[str]:
    """Describe a node name validation result; None when the name is valid."""
    code = _code(validation_result)
    if code == NodeNameValidation.VALID:
        return None
    try:
        return _NODE_MESSAGES[NodeNameValidation(code)]
    except ValueError:
        return "unknown result code for rmw node name validation"