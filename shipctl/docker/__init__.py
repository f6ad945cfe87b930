"""Docker CLI adapter."""

from shipctl.docker.client import DockerClient, image_ref

__all__ = ["DockerClient", "image_ref"]
