#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/state.py
"""Per-conversion state.

Each call to :meth:`html2gfm.converter.Converter.convert` allocates a fresh
:class:`ConversionState` and binds it to a context variable for the duration
of the call. Rules keep the ``(content, el, options)`` signature and reach the
state through :func:`current_state`. Because the binding is a context
variable, concurrent conversions in different threads never see each other's
state.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Generator

from bs4.element import PageElement

from html2gfm.utils.lists import DEFAULT_LIST_ITEM_CONTEXT, ListItemContext


@dataclass
class ConversionState:
    """Transient data for a single conversion.

    Parameters
    ----------
    list_items : dict[int, ListItemContext]
        List-item side-table keyed by ``id(li)``
    link_count : int
        Number of reference-style links emitted so far

    """

    list_items: dict[int, ListItemContext] = field(default_factory=dict)
    link_count: int = 0

    def list_item_context(self, el: PageElement) -> ListItemContext:
        """Return the annotation for ``el``, or the plain bullet default."""
        return self.list_items.get(id(el), DEFAULT_LIST_ITEM_CONTEXT)

    def next_link_index(self) -> int:
        """Allocate the next reference-link number (1-based)."""
        self.link_count += 1
        return self.link_count


_current_state: ContextVar[ConversionState | None] = ContextVar("html2gfm_conversion_state", default=None)


def current_state() -> ConversionState:
    """Return the state of the conversion in progress.

    Outside of a conversion (for example when a rule is called directly)
    a fresh, empty state is returned.
    """
    state = _current_state.get()
    return state if state is not None else ConversionState()


@contextmanager
def conversion_state(state: ConversionState) -> Generator[ConversionState, None, None]:
    """Bind ``state`` as the current state for the enclosed block."""
    token = _current_state.set(state)
    try:
        yield state
    finally:
        _current_state.reset(token)
