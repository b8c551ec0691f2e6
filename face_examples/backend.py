"""Lazy access to dlib so importing the package does not require it."""

from __future__ import annotations

from types import ModuleType


def import_dlib(purpose: str) -> ModuleType:
    try:
        import dlib
    except Exception as exc:  # noqa: BLE001
        raise ImportError(f"dlib must be installed to {purpose}") from exc

    return dlib
