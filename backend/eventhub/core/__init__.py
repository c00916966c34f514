"""Core business logic services for event registration."""

from .registration_service import RegistrationService

__all__ = [
    "RegistrationService",
]
