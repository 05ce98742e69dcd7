#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for converter options.

Option classes are frozen dataclasses. :class:`CloneFrozenMixin` gives them
copy-with-changes and construction from plain mappings such as parsed JSON
or keyword dictionaries coming from JavaScript-style configuration.
"""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """Convert a camelCase option name to snake_case.

    Examples
    --------
        >>> to_snake_case("bulletListMarker")
        'bullet_list_marker'
        >>> to_snake_case("domain")
        'domain'

    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin for frozen option dataclasses.

    Adds :meth:`create_updated` for modified copies and :meth:`from_dict`
    for building an instance from a mapping.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> Self:
        """Build an instance from a plain mapping.

        Keys may be given in snake_case (``heading_style``) or camelCase
        (``headingStyle``). Unknown keys are ignored and logged at debug
        level; missing keys keep their defaults.

        Parameters
        ----------
        values : Mapping[str, Any]
            Option names and values

        Returns
        -------
        Self
            New options instance

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = to_snake_case(key)
            if name in known:
                kwargs[name] = value
            else:
                logger.debug("Ignoring unknown option '%s' for %s", key, cls.__name__)
        return cls(**kwargs)
