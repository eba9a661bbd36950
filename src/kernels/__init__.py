"""
Kernel layer.

`src/kernels/signed/` holds the kernel spec (.yaml) for the two's-complement
signed integer kernel: the supported widths and their boundary literals. The
Python implementation in `src/core/signed_int/` loads it and checks its
constants on import.
"""
