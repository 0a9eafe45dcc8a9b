"""Per-endpoint precondition checks, run before any request is encoded."""

from __future__ import annotations

from holodex_client.core.constants import RelationKind
from holodex_client.core.endpoints import EndpointDescriptor
from holodex_client.core.errors import (
    IncompatibleFilterCombination,
    MissingRequiredField,
    UnsupportedFilter,
)
from holodex_client.core.filters import FilterSet


def validate(endpoint: EndpointDescriptor, filters: FilterSet) -> None:
    """Reject filter sets the endpoint cannot serve.

    Checks, in order: unsupported fields, missing required fields, then
    endpoint-specific combination rules.

    Raises:
        UnsupportedFilter: a provided field is not accepted by the endpoint.
        MissingRequiredField: a required field is absent or empty.
        IncompatibleFilterCombination: fields are not allowed together.
    """
    unsupported = tuple(f for f in filters.provided() if f not in endpoint.accepted)
    if unsupported:
        raise UnsupportedFilter(endpoint.name, unsupported)

    for field in endpoint.required:
        if not filters.has(field):
            raise MissingRequiredField(endpoint.name, field)

    _check_combinations(endpoint, filters)


def _check_combinations(endpoint: EndpointDescriptor, filters: FilterSet) -> None:
    if filters.relation is RelationKind.VIDEOS and filters.has("languages"):
        raise IncompatibleFilterCombination(
            endpoint.name,
            ("relation", "languages"),
            "language filtering applies to clips and collabs only",
        )

    if (
        filters.from_time is not None
        and filters.to_time is not None
        and filters.from_time > filters.to_time
    ):
        raise IncompatibleFilterCombination(
            endpoint.name,
            ("from_time", "to_time"),
            "'from' is later than 'to'",
        )
