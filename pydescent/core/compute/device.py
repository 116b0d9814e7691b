"""
Compute device detection.

The GPU backend needs PyTorch; everything else runs on NumPy. torch is
imported lazily here so that CPU-only installs never pay for it.
"""

import platform
from dataclasses import dataclass
from typing import Literal


DeviceType = Literal['cpu', 'cuda', 'mps']


@dataclass(frozen=True)
class DeviceInfo:
    """
    A compute device.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        name: Human-readable device name
        memory_bytes: Total device memory, None when unknown
    """
    device_type: DeviceType
    name: str
    memory_bytes: int | None = None

    @property
    def is_gpu(self) -> bool:
        return self.device_type != 'cpu'

    def __str__(self) -> str:
        if self.memory_bytes is None:
            return f"{self.device_type.upper()} ({self.name})"
        return f"{self.device_type.upper()} ({self.name}, {self.memory_bytes / 1024**3:.1f}GB)"


def detect_gpu() -> DeviceInfo | None:
    """
    Return the best available GPU, or None.

    CUDA is preferred over Apple MPS. Returns None when torch is not
    installed.
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        props = torch.cuda.get_device_properties(torch.cuda.current_device())
        return DeviceInfo(
            device_type='cuda',
            name=props.name,
            memory_bytes=props.total_memory,
        )

    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo(device_type='mps', name='Apple Silicon GPU')

    return None


def get_cpu_info() -> DeviceInfo:
    """Describe the host CPU."""
    name = platform.processor() or platform.machine() or "Unknown CPU"
    return DeviceInfo(device_type='cpu', name=name)


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Pick a device according to preference and availability.

    Args:
        prefer: 'cpu' always gives the CPU; 'gpu' requires a GPU;
            'auto' gives a GPU when present, otherwise the CPU.

    Raises:
        RuntimeError: If 'gpu' is requested and none is available
    """
    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()
    if prefer == 'gpu' and gpu is None:
        raise RuntimeError(
            "GPU requested but no GPU available. "
            "Install PyTorch with CUDA or MPS support, or use backend='cpu'."
        )
    return gpu if gpu is not None else get_cpu_info()
