"""
Submission payload formatting and operator identity lookup.
"""

from .formatter import format_for_submission, prepare_submission, resolve_operator_label
from .identity import (
    CallableIdentityProvider,
    EnvironmentIdentityProvider,
    IdentityProvider,
    StaticIdentityProvider,
)

__all__ = [
    "format_for_submission",
    "prepare_submission",
    "resolve_operator_label",
    "IdentityProvider",
    "StaticIdentityProvider",
    "EnvironmentIdentityProvider",
    "CallableIdentityProvider",
]
