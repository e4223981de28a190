"""Launch resolution domain exports."""

from .descriptor_resolver import (
    LAUNCH_NAME_PREFIX,
    LaunchDescriptorResolver,
    resolve_launch_descriptor,
)
from .launch_descriptor import LaunchDescriptor

__all__ = [
    "LAUNCH_NAME_PREFIX",
    "LaunchDescriptor",
    "LaunchDescriptorResolver",
    "resolve_launch_descriptor",
]
