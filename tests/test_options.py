import pytest

from rmwkit.errors import InvalidArgumentError
from rmwkit.options import (
    MAX_EXPRESSION_PARAMETERS,
    ContentFilterOptions,
    PublisherOptions,
    SecurityEnforcementPolicy,
    SecurityOptions,
    UniqueNetworkFlowEndpointsRequirement,
    default_publisher_options,
    default_security_options,
)


def test_default_publisher_options():
    options = default_publisher_options()
    assert options.rmw_specific_publisher_payload is None
    assert (
        options.require_unique_network_flow_endpoints
        == UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
    )
    assert options == PublisherOptions()


def test_not_required_is_zero():
    options = default_publisher_options()
    assert options.require_unique_network_flow_endpoints == 0


def test_default_security_options():
    options = default_security_options()
    assert options.enforce_security == SecurityEnforcementPolicy.PERMISSIVE
    assert options.security_root_path is None


def test_zero_security_options_match_fini_state():
    options = SecurityOptions(SecurityEnforcementPolicy.ENFORCE, "/keys")
    options.fini()
    assert options == SecurityOptions()


def test_security_set_root_path():
    options = default_security_options()
    options.set_root_path("/keys/root")
    assert options.security_root_path == "/keys/root"


def test_security_set_root_path_rejects_none():
    options = default_security_options()
    with pytest.raises(InvalidArgumentError):
        options.set_root_path(None)
    assert options.security_root_path is None


def test_security_copy_is_independent():
    source = SecurityOptions(SecurityEnforcementPolicy.ENFORCE, "/keys/a")
    duplicate = source.copy()
    assert duplicate == source
    assert duplicate is not source
    duplicate.set_root_path("/keys/b")
    assert source.security_root_path == "/keys/a"


def test_content_filter_zero():
    options = ContentFilterOptions()
    assert options.filter_expression is None
    assert options.expression_parameters == []


def test_content_filter_set():
    options = ContentFilterOptions()
    options.set("data = %0 AND id > %1", ["'x'", "3"])
    assert options.filter_expression == "data = %0 AND id > %1"
    assert options.expression_parameters == ["'x'", "3"]


def test_content_filter_set_without_parameters():
    options = ContentFilterOptions()
    options.set("id > 3")
    assert options.filter_expression == "id > 3"
    assert options.expression_parameters == []


def test_content_filter_set_rejects_none_expression():
    options = ContentFilterOptions()
    options.set("a = %0", ["1"])
    with pytest.raises(InvalidArgumentError):
        options.set(None, ["2"])
    assert options.filter_expression == "a = %0"
    assert options.expression_parameters == ["1"]


def test_content_filter_parameter_limit():
    options = ContentFilterOptions()
    params = [str(i) for i in range(MAX_EXPRESSION_PARAMETERS)]
    options.set("x", params)
    assert len(options.expression_parameters) == MAX_EXPRESSION_PARAMETERS
    with pytest.raises(InvalidArgumentError):
        options.set("x", params + ["extra"])


def test_content_filter_rejects_non_string_parameter():
    with pytest.raises(InvalidArgumentError):
        ContentFilterOptions().set("x", ["1", 2])


def test_content_filter_copy_is_independent():
    source = ContentFilterOptions()
    source.set("a = %0", ["1"])
    duplicate = source.copy()
    assert duplicate == source
    duplicate.expression_parameters.append("2")
    assert source.expression_parameters == ["1"]


def test_content_filter_copy_of_zero_raises():
    with pytest.raises(InvalidArgumentError):
        ContentFilterOptions().copy()


def test_content_filter_fini():
    options = ContentFilterOptions()
    options.set("a = %0", ["1"])
    options.fini()
    assert options == ContentFilterOptions()