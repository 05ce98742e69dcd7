#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for html2gfm conversion.

Options are frozen dataclasses: build one per configuration and derive
variants with ``create_updated``.
"""

from __future__ import annotations

from html2gfm.options.base import CloneFrozenMixin
from html2gfm.options.converter import ConverterOptions

__all__ = ["CloneFrozenMixin", "ConverterOptions"]
