# Oddgamma: Odd Clifford Group Gamma Matrices (C) 2026 The Oddgamma Authors
# Licensed under the Apache License, Version 2.0

"""Device resolution for the gamma matrix tensors."""

import torch


def resolve_device(device: str = "auto") -> str:
    """Resolve ``'auto'`` to the best available device.

    Priority: cuda > cpu. MPS has no complex128 support.
    """
    if device != "auto":
        return device
    if torch.cuda.is_available():
        return "cuda"
    return "cpu"
