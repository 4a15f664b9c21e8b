"""
Inventory filter matching.

Matching is deliberately coarse: a record's full JSON dump is searched for
each filter value as a substring, so the filter key itself is not used to
scope the search. Fixture ids are short and do not overlap, which keeps this
unambiguous for the default inventory.
"""

from typing import Iterable, List

from ..models import InstanceInformation, InstanceInformationStringFilter


def instance_dump(instance: InstanceInformation) -> str:
    """Structural dump of every attribute, e.g. ``{"PlatformType":"Linux",...}``"""
    return instance.model_dump_json(by_alias=True)


def instance_matches_filter(
    instance: InstanceInformation, instance_filter: InstanceInformationStringFilter
) -> bool:
    """True if at least one of the filter's values occurs in the record dump"""
    dumped = instance_dump(instance)
    return any(value in dumped for value in instance_filter.values)


def filter_instances(
    instances: Iterable[InstanceInformation],
    filters: List[InstanceInformationStringFilter],
) -> List[InstanceInformation]:
    """Return a new list of the records passing every filter (AND across filters)"""
    return [
        instance
        for instance in instances
        if all(instance_matches_filter(instance, f) for f in filters)
    ]
