"""Core types shared by every layer."""

from .config import DeploySettings, ReleaseSettings, Settings, SettingsError, load_settings
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "DeploySettings",
    "ReleaseSettings",
    "Settings",
    "SettingsError",
    "load_settings",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
