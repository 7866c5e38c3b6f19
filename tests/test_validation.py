import pytest

from rmwkit.errors import InvalidArgumentError
from rmwkit.validation import (
    NODE_NAME_MAX_NAME_LENGTH,
    TOPIC_MAX_NAME_LENGTH,
    NodeNameValidation,
    TopicValidation,
    ValidationResult,
    full_topic_name_validation_result_string,
    node_name_validation_result_string,
    validate_full_topic_name,
    validate_node_name,
)


def test_invalid_parameters():
    with pytest.raises(InvalidArgumentError):
        validate_full_topic_name(None)
    assert (
        full_topic_name_validation_result_string(-1)
        == "unknown result code for rmw topic name validation"
    )


@pytest.mark.parametrize("name", ["/basename_only", "/with_one/namespace"])
def test_valid_topic(name):
    result = validate_full_topic_name(name)
    assert result.result is TopicValidation.VALID
    assert result.is_valid
    assert result.invalid_index is None
    assert full_topic_name_validation_result_string(result.result) is None


@pytest.mark.parametrize(
    "name, expected, index",
    [
        ("", TopicValidation.INVALID_IS_EMPTY_STRING, 0),
        ("not_absolute", TopicValidation.INVALID_NOT_ABSOLUTE, 0),
        ("not/absolute", TopicValidation.INVALID_NOT_ABSOLUTE, 0),
        ("/ends/with/", TopicValidation.INVALID_ENDS_WITH_FORWARD_SLASH, 10),
        ("/", TopicValidation.INVALID_ENDS_WITH_FORWARD_SLASH, 0),
        ("/~/unexpanded_tilde", TopicValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 1),
        ("/unexpanded_sub/{node}", TopicValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 16),
        ("/question?", TopicValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 9),
        ("/with spaces", TopicValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 5),
        ("/repeated//slashes", TopicValidation.INVALID_CONTAINS_REPEATED_FORWARD_SLASH, 10),
        ("/9starts_with_number", TopicValidation.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, 1),
        ("/starts/42with/number", TopicValidation.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, 8),
    ],
)
def test_invalid_topics(name, expected, index):
    result = validate_full_topic_name(name)
    assert result == ValidationResult(expected, index)
    assert not result.is_valid
    message = full_topic_name_validation_result_string(result.result)
    assert isinstance(message, str) and message


def test_topic_too_long():
    invalid_and_long_topic = "a" * (TOPIC_MAX_NAME_LENGTH + 1)
    result = validate_full_topic_name(invalid_and_long_topic)
    assert result.result is TopicValidation.INVALID_NOT_ABSOLUTE
    assert result.invalid_index == 0

    valid_but_long_topic = "/" + invalid_and_long_topic
    result = validate_full_topic_name(valid_but_long_topic)
    assert result.result is TopicValidation.INVALID_TOO_LONG
    assert result.invalid_index == TOPIC_MAX_NAME_LENGTH - 1
    assert full_topic_name_validation_result_string(result) is not None
    assert full_topic_name_validation_result_string(result) != (
        "unknown result code for rmw topic name validation"
    )


def test_topic_max_length_matches_header():
    assert TOPIC_MAX_NAME_LENGTH == 255 - 8
    exact = "/" + "a" * (TOPIC_MAX_NAME_LENGTH - 1)
    assert validate_full_topic_name(exact).is_valid


def test_all_topic_codes_have_distinct_messages():
    messages = [
        full_topic_name_validation_result_string(code)
        for code in TopicValidation
        if code is not TopicValidation.VALID
    ]
    assert None not in messages
    assert len(set(messages)) == len(messages)


def test_node_name_valid():
    result = validate_node_name("my_node")
    assert result.result is NodeNameValidation.VALID
    assert result.invalid_index is None
    assert node_name_validation_result_string(result) is None


@pytest.mark.parametrize(
    "name, expected, index",
    [
        ("", NodeNameValidation.INVALID_IS_EMPTY_STRING, 0),
        ("my-node", NodeNameValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 2),
        ("/node", NodeNameValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 0),
        ("1node", NodeNameValidation.INVALID_STARTS_WITH_NUMBER, 0),
    ],
)
def test_node_name_invalid(name, expected, index):
    assert validate_node_name(name) == ValidationResult(expected, index)
    assert node_name_validation_result_string(expected) is not None


def test_node_name_too_long_checked_last():
    assert validate_node_name("a" * NODE_NAME_MAX_NAME_LENGTH).is_valid
    result = validate_node_name("a" * (NODE_NAME_MAX_NAME_LENGTH + 1))
    assert result == ValidationResult(
        NodeNameValidation.INVALID_TOO_LONG, NODE_NAME_MAX_NAME_LENGTH - 1
    )
    bad_and_long = validate_node_name("9" + "a" * NODE_NAME_MAX_NAME_LENGTH)
    assert bad_and_long.result is NodeNameValidation.INVALID_STARTS_WITH_NUMBER


def test_node_name_errors():
    with pytest.raises(InvalidArgumentError):
        validate_node_name(None)
    assert (
        node_name_validation_result_string(-1)
        == "unknown result code for rmw node name validation"
    )