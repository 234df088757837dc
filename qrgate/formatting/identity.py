"""
Identity providers: who is the operator verifying a wristband.

The formatter only needs one awaited call per payload, so anything that
can answer get_current_operator_label() can be plugged in.
"""

import inspect
import os
from typing import Awaitable, Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class IdentityProvider(Protocol):
    """
    Supplies the display label (name or email) of the signed-in operator.

    Returns None when nobody is signed in or the identity is unknown.
    """

    async def get_current_operator_label(self) -> str | None:
        ...


class StaticIdentityProvider:
    """Always reports the same operator; None means anonymous."""

    def __init__(self, label: str | None):
        self.label = label

    async def get_current_operator_label(self) -> str | None:
        return self.label


class EnvironmentIdentityProvider:
    """Reads the operator label from an environment variable at lookup time."""

    DEFAULT_VARIABLE = "QRGATE_OPERATOR"

    def __init__(self, variable: str = DEFAULT_VARIABLE):
        self.variable = variable

    async def get_current_operator_label(self) -> str | None:
        return os.getenv(self.variable) or None


class CallableIdentityProvider:
    """
    Adapts a plain or async callable, e.g. a session store lookup.

    Usage:
        provider = CallableIdentityProvider(session.get_user_email)
    """

    def __init__(self, func: Callable[[], Union[str, None, Awaitable[str | None]]]):
        self.func = func

    async def get_current_operator_label(self) -> str | None:
        label = self.func()
        if inspect.isawaitable(label):
            label = await label
        return label
