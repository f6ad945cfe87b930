"""Elastic Beanstalk CLI adapter."""

from shipctl.eb.client import READY_STATUS, EbClient, parse_status

__all__ = ["READY_STATUS", "EbClient", "parse_status"]
