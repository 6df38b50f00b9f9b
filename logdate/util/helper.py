"""This module contains helper functions that are shared by different modules."""

import re
from functools import lru_cache, reduce
from typing import Iterable, Optional, Union

_MISSING = object()


def _add_and_overwrite_key(sub_dict, key):
    current_value = sub_dict.get(key)
    if isinstance(current_value, dict):
        return current_value
    sub_dict.update({key: {}})
    return sub_dict.get(key)


def add_and_overwrite(event: dict, target_field: str, content) -> None:
    """
    Write content to the target_field in the given event. target_field can be a dotted subfield.
    In case of missing fields, all intermediate fields will be created. Existing values and
    intermediate values that are not dicts will be overwritten.

    Parameters
    ----------
    event: dict
        Original log-event that is currently processed
    target_field: str
        The dotted subfield string indicating the target
    content:
        The content that should be written to the named target
    """
    field_path = [event, *get_dotted_field_list(target_field)]
    target_key = field_path.pop()
    target_parent = reduce(_add_and_overwrite_key, field_path)
    target_parent[target_key] = content


def _get_slice_arg(slice_item):
    return int(slice_item) if slice_item else None


def _get_item(items, item):
    try:
        return dict.__getitem__(items, item)
    except TypeError:
        if ":" in item:
            slice_args = map(_get_slice_arg, item.split(":"))
            item = slice(*slice_args)
        else:
            item = int(item)
        return list.__getitem__(items, item)


def get_dotted_field_value(event: dict, dotted_field: str) -> Optional[Union[dict, list, str]]:
    """
    Returns the value of a requested dotted_field by iterating over the event dictionary until the
    field was found. In case the field could not be found None is returned.

    Parameters
    ----------
    event: dict
        The event from which the dotted field value should be extracted
    dotted_field: str
        The dotted field name which identifies the requested value

    Returns
    -------
    dict_: dict, list, str
        The value of the requested dotted field.
    """
    value = _lookup_dotted_field(event, dotted_field)
    return None if value is _MISSING else value


def has_dotted_field(event: dict, dotted_field: str) -> bool:
    """Returns True if the dotted field exists in the event, even if its value is None."""
    return _lookup_dotted_field(event, dotted_field) is not _MISSING


def _lookup_dotted_field(event, dotted_field):
    try:
        for field in get_dotted_field_list(dotted_field):
            event = _get_item(event, field)
        return event
    except (KeyError, ValueError, TypeError, IndexError):
        return _MISSING


@lru_cache(maxsize=100000)
def get_dotted_field_list(dotted_field: str) -> list[str]:
    """make lookup of dotted field in the dotted_field_lookup_table and ensures
    it is added if not found.

    Parameters
    ----------
    dotted_field : str
        the dotted field input

    Returns
    -------
    list[str]
        a list with keys for dictionary iteration
    """
    return dotted_field.split(".")


def add_tags(event: dict, tags: Iterable[str]) -> None:
    """Append tags to the :code:`tags` list of the event.
    The list is created if it is missing and there is a tag to add. Tags already
    present are skipped and new tags keep their given order.
    """
    tags = list(tags)
    if not tags:
        return
    existing_tags = event.get("tags")
    if not isinstance(existing_tags, list):
        existing_tags = [] if existing_tags is None else [existing_tags]
        event["tags"] = existing_tags
    for tag in tags:
        if tag not in existing_tags:
            existing_tags.append(tag)


def camel_to_snake(camel: str) -> str:
    """ensures that the input string is snake_case"""

    _underscorer1 = re.compile(r"(.)([A-Z][a-z]+)")
    _underscorer2 = re.compile("([a-z0-9])([A-Z])")

    subbed = _underscorer1.sub(r"\1_\2", camel)
    return _underscorer2.sub(r"\1_\2", subbed).lower()
