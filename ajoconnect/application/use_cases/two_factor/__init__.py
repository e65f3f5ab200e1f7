"""Two-factor authentication use cases."""

from .check_status import is_two_factor_enabled

__all__ = ["is_two_factor_enabled"]
