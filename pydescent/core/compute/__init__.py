"""
Shared compute infrastructure for pydescent.

Hardware detection, timing and numeric tolerance tiers used by the
domain backends. Domain-specific backends live in {domain}/backends/.

Submodules:
    device: Hardware detection and device selection
    timing: Section timing for Result.timing
    tolerances: Cross-backend comparison tolerances
"""

from pydescent.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pydescent.core.compute.timing import Timer

__all__ = [
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    "Timer",
]
