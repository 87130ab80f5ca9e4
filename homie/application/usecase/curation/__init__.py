"""Curation preference use cases."""

from .preferences import (
    AddPreferenceRequest,
    AddPreferenceUseCase,
    DeletePreferenceRequest,
    DeletePreferenceUseCase,
    ListPreferencesRequest,
    ListPreferencesUseCase,
    UpdatePreferenceRequest,
    UpdatePreferenceUseCase,
)

__all__ = [
    "AddPreferenceRequest",
    "AddPreferenceUseCase",
    "DeletePreferenceRequest",
    "DeletePreferenceUseCase",
    "ListPreferencesRequest",
    "ListPreferencesUseCase",
    "UpdatePreferenceRequest",
    "UpdatePreferenceUseCase",
]
