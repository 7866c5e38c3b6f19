"""Options for publishers, security and subscription content filtering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from rmwkit.errors import InvalidArgumentError

MAX_EXPRESSION_PARAMETERS = 100
"""Parameter placeholders in a filter expression are numbered below this."""


class UniqueNetworkFlowEndpointsRequirement(enum.IntEnum):
    """Whether an entity needs network flow endpoints of its own."""

    NOT_REQUIRED = 0
    STRICTLY_REQUIRED = 1
    OPTIONALLY_REQUIRED = 2
    SYSTEM_DEFAULT = 3


@dataclass
class PublisherOptions:
    """Options used when creating a publisher."""

    rmw_specific_publisher_payload: Any = None
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpointsRequirement = (
        UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
    )


def default_publisher_options() -> PublisherOptions:
    """Return publisher options with no payload and no unique endpoints required."""
    return PublisherOptions(
        rmw_specific_publisher_payload=None,
        require_unique_network_flow_endpoints=(
            UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
        ),
    )


class SecurityEnforcementPolicy(enum.IntEnum):
    """How strictly security is enforced."""

    PERMISSIVE = 0
    ENFORCE = 1


@dataclass
class SecurityOptions:
    """Security enforcement policy and the root path of security files.

    A default instance is zero initialized.
    """

    enforce_security: SecurityEnforcementPolicy = SecurityEnforcementPolicy.PERMISSIVE
    security_root_path: Optional[str] = None

    def copy(self) -> SecurityOptions:
        """Return an independent copy of these options."""
        return SecurityOptions(
            enforce_security=self.enforce_security,
            security_root_path=self.security_root_path,
        )

    def set_root_path(self, security_root_path: str) -> None:
        """Replace the security root path."""
        if security_root_path is None:
            raise InvalidArgumentError("security_root_path is null")
        if not isinstance(security_root_path, str):
            raise InvalidArgumentError("security_root_path must be a string")
        self.security_root_path = security_root_path

    def fini(self) -> None:
        """Release the root path and return to the zero state."""
        self.security_root_path = None
        self.enforce_security = SecurityEnforcementPolicy.PERMISSIVE


def default_security_options() -> SecurityOptions:
    """Return permissive security options with no root path."""
    return SecurityOptions(
        enforce_security=SecurityEnforcementPolicy.PERMISSIVE,
        security_root_path=None,
    )


def _checked_parameters(expression_parameters: Optional[Iterable[str]]) -> list[str]:
    if expression_parameters is None:
        return []
    if isinstance(expression_parameters, (str, bytes)):
        raise InvalidArgumentError("expression_parameters must be a sequence of strings")
    parameters = list(expression_parameters)
    if len(parameters) > MAX_EXPRESSION_PARAMETERS:
        raise InvalidArgumentError(
            f"expression_parameters must not hold more than {MAX_EXPRESSION_PARAMETERS} items"
        )
    for parameter in parameters:
        if not isinstance(parameter, str):
            raise InvalidArgumentError("expression_parameters must hold only strings")
    return parameters


@dataclass
class ContentFilterOptions:
    """A filter expression, like an SQL WHERE clause, and its ``%n`` parameters.

    A default instance is zero initialized.
    """

    filter_expression: Optional[str] = None
    expression_parameters: list[str] = field(default_factory=list)

    def set(
        self,
        filter_expression: str,
        expression_parameters: Optional[Iterable[str]] = None,
    ) -> None:
        """Replace the expression and its parameters; nothing changes on error."""
        if filter_expression is None:
            raise InvalidArgumentError("filter_expression is null")
        if not isinstance(filter_expression, str):
            raise InvalidArgumentError("filter_expression must be a string")
        parameters = _checked_parameters(expression_parameters)
        self.filter_expression = filter_expression
        self.expression_parameters = parameters

    def copy(self) -> ContentFilterOptions:
        """Return an independent copy of these options."""
        duplicate = ContentFilterOptions()
        duplicate.set(self.filter_expression, self.expression_parameters)
        return duplicate

    def fini(self) -> None:
        """Release the expression and parameters, returning to the zero state."""
        self.filter_expression = None
        self.expression_parameters = []