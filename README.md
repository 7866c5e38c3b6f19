# rmwkit

Building blocks for a publish/subscribe middleware layer, with no
dependencies outside the standard library.

## What is in it

- **QoS policies** (`rmwkit.qos`): the `QosPolicyKind` bit-flag enum and the
  `DurabilityPolicy`, `HistoryPolicy`, `LivelinessPolicy` and
  `ReliabilityPolicy` enums. Each has a `*_to_str` function
  (`qos_policy_kind_to_str`, `durability_policy_to_str`,
  `history_policy_to_str`, `liveliness_policy_to_str`,
  `reliability_policy_to_str`) that returns the policy's name, or `None` for
  `INVALID`/`UNKNOWN`, and a `*_from_str` function that returns the member
  for a name, falling back to `INVALID` or `UNKNOWN` for unrecognised text.
  Passing `None` to a `*_from_str` function raises `InvalidArgumentError`.
- **Name validation** (`rmwkit.validation`): `validate_full_topic_name` and
  `validate_node_name` return a `ValidationResult` holding a
  `TopicValidation` or `NodeNameValidation` code and, when invalid, the
  index of the offending character (`is_valid` tells the two apart). The
  length limit is always checked last. `full_topic_name_validation_result_string`
  and `node_name_validation_result_string` turn a code or a result into a
  description, or `None` when the name is valid. The module also defines
  `TOPIC_MAX_NAME_LENGTH` (247), `NODE_NAME_MAX_NAME_LENGTH` (255) and
  `DEFAULT_DOMAIN_ID`.
- **Network flow endpoints** (`rmwkit.network_flow_endpoint`): the
  `TransportProtocol` and `InternetProtocol` enums with
  `transport_protocol_string` and `internet_protocol_string`; the
  `NetworkFlowEndpoint` dataclass, whose `set_internet_address` refuses
  addresses of `INET_ADDRSTRLEN` (48) bytes or more; and
  `NetworkFlowEndpointArray` with `init(size)`, `fini()` and `check_zero()`.
- **Names and types** (`rmwkit.names_and_types`): the `NamesAndTypes`
  container with `init(size)`, `fini()` and `check_zero()`, iterable as
  `(name, types)` pairs, and `check_zero_string_array`.
- **Entity options** (`rmwkit.options`): `PublisherOptions` and
  `default_publisher_options()`; `SecurityOptions`
  (`copy`, `set_root_path`, `fini`) and `default_security_options()`;
  `ContentFilterOptions` (`set`, `copy`, `fini`), which accepts at most
  `MAX_EXPRESSION_PARAMETERS` (100) expression parameters.
- **Key/value user data** (`rmwkit.key_value`): `parse_key_value` reads
  `key=value;` blobs into a dict of `str` keys and `bytes` values, sorted by
  key. Malformed input gives an empty dict rather than an error.
- **Errors** (`rmwkit.errors`): `RmwError` and its subclasses
  `InvalidArgumentError`, `BadAllocError` and
  `IncorrectRmwImplementationError`, plus the helpers
  `check_type_identifiers_match`, `demangle`, `try_construct` and
  `try_destroy`.

## What it does not do

rmwkit is a set of data types and checks. It does not create nodes,
publishers or subscriptions, send or receive messages, or query a running
graph: `NamesAndTypes` is only the container such a query would fill in.

## Installation

```
pip install rmwkit
```

## Examples

```python
from rmwkit.validation import (
    TopicValidation,
    validate_full_topic_name,
    full_topic_name_validation_result_string,
)

result = validate_full_topic_name("/repeated//slashes")
assert result.result == TopicValidation.INVALID_CONTAINS_REPEATED_FORWARD_SLASH
assert result.invalid_index == 10
print(full_topic_name_validation_result_string(result))
```

```python
from rmwkit.qos import ReliabilityPolicy, reliability_policy_from_str

assert reliability_policy_from_str("best_effort") is ReliabilityPolicy.BEST_EFFORT
assert reliability_policy_from_str("nonsense") is ReliabilityPolicy.UNKNOWN
```

```python
from rmwkit.key_value import parse_key_value

assert parse_key_value(b"enclave=/;") == {"enclave": b"/"}
```

```python
from rmwkit.network_flow_endpoint import NetworkFlowEndpointArray

endpoints = NetworkFlowEndpointArray()
endpoints.init(3)
assert len(endpoints) == 3
endpoints.fini()
endpoints.check_zero()
```

## Running the tests

```
pip install -e ".[test]"
pytest
```