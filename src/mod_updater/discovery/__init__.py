"""Mods directory discovery for supported launchers."""

from .prism import InstanceInfo, PrismInstanceLocator

__all__ = ["InstanceInfo", "PrismInstanceLocator"]
