"""Errors raised while checking a projection configuration."""

from __future__ import annotations

from typing import List


class ConfigurationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
