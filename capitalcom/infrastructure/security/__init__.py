"""Credential helpers for logging in to Capital.com."""

from .encryption import encrypt_password

__all__ = ["encrypt_password"]
