"""Rule modules and the grammar registry."""

from __future__ import annotations

from .base import RuleModule
from .registry import RuleRegistry, build_default_registry
from .simple import SimpleRule

__all__ = ["RuleModule", "RuleRegistry", "SimpleRule", "build_default_registry"]
