# topmark:header:start
#
#   project      : SymReport
#   file         : __init__.py
#   file_relpath : src/symreport/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared, domain-agnostic building blocks (enum helpers)."""

from __future__ import annotations

from symreport.core.enum_mixins import KeyedStrEnum

__all__ = [
    "KeyedStrEnum",
]
