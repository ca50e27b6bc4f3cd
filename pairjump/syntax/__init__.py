"""Comment/string classification services."""

from __future__ import annotations

from .classify import Classifier, NullClassifier, PygmentsClassifier, SpanClassifier

__all__ = ["Classifier", "NullClassifier", "PygmentsClassifier", "SpanClassifier"]
