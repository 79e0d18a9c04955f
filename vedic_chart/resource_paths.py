"""Locate bundled data files (JPL kernels) for source, installed and frozen builds."""
import os
import sys
from pathlib import Path
from typing import List

# Sub-folders searched below the resource root, in order.
KERNEL_DIRS = ('ephe', 'data')


def get_resource_root() -> Path:
    """VEDIC_RESOURCE_ROOT, the PyInstaller bundle, or the project checkout."""
    env_root = os.getenv('VEDIC_RESOURCE_ROOT')
    if env_root:
        return Path(env_root).expanduser()
    bundle = getattr(sys, '_MEIPASS', None)
    if getattr(sys, 'frozen', False) and bundle:
        return Path(bundle)
    return Path(__file__).resolve().parent.parent


def candidate_roots() -> List[Path]:
    base = get_resource_root()
    return [base] + [base / name for name in KERNEL_DIRS if (base / name).is_dir()]


def resource_path(*parts: str) -> Path:
    """First existing match under the candidate roots, else the path under the root.

    A missing kernel is then downloaded into the root by skyfield's loader.
    """
    roots = candidate_roots()
    for root in roots:
        candidate = root.joinpath(*parts)
        if candidate.exists():
            return candidate
    return roots[0].joinpath(*parts)
