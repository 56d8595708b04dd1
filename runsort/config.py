"""Runtime settings."""

from __future__ import annotations

import os

from attrs import frozen

ENV_CHECK_CONTRACTS = "RUNSORT_CHECK_CONTRACTS"
FALSY_VALUES = ("0", "false", "no", "off")

_override: Settings | None = None


@frozen
class Settings:
    """Behaviour switches for the sorting routines.

    Parameters
    ----------
    check_contracts : bool, optional (default True)
        Whether :func:`runsort.sort.merge` scans both inputs to confirm they are
        sorted before splicing them together.
    """

    check_contracts: bool = True


def get_settings() -> Settings:
    """Resolve the active settings.

    Priority:
    1) settings installed with :func:`configure`
    2) env ``RUNSORT_CHECK_CONTRACTS``
    3) the defaults on :class:`Settings`

    Returns
    -------
    Settings
        The settings in effect.
    """
    if _override is not None:
        return _override

    raw = os.getenv(ENV_CHECK_CONTRACTS)
    if raw is None:
        return Settings()

    return Settings(check_contracts=raw.strip().lower() not in FALSY_VALUES)


def configure(settings: Settings | None) -> None:
    """Install process-wide settings.

    Parameters
    ----------
    settings : Settings | None
        The settings to use. ``None`` removes any override so the environment
        is consulted again.
    """
    global _override
    _override = settings
