"""Configuration loader helpers."""

from .settings import SETTINGS, AppSettings, update_from_kwargs  # noqa: F401

__all__ = ["SETTINGS", "AppSettings", "update_from_kwargs"]
