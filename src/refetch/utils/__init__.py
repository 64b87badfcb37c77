r"""Utility helpers shared by the retry controller."""

from __future__ import annotations

__all__ = ["sleep_ms"]

from refetch.utils.sleep import sleep_ms
