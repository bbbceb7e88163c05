"""
Pipeline configuration.

Development mode enables shape diagnostics in the reducer combinator and
chain assembly logging in the middleware builder. The flag is passed
explicitly; nothing here reads process state unless from_env() is called.

Environment Variables:
    STATEKIT_ENV: "production" disables development mode - default: development
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DispatchConfig:
    """
    Fields:
        dev_mode: Emit diagnostic warnings (False = optimized build)
    """
    dev_mode: bool = True

    @staticmethod
    def from_env() -> "DispatchConfig":
        env = os.getenv("STATEKIT_ENV", "development").strip().lower()
        return DispatchConfig(dev_mode=env != "production")

    @staticmethod
    def production() -> "DispatchConfig":
        return DispatchConfig(dev_mode=False)
