"""shipctl: release, publish and deploy orchestration."""

__version__ = "0.4.0"
