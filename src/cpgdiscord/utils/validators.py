"""Validation utilities for CpGDiscord."""

from __future__ import annotations

import importlib
from typing import List


REQUIRED_MODULES = ["numpy", "pandas", "pysam", "yaml", "click", "tqdm"]


def validate_installation(full_check: bool = False) -> List[str]:
    """
    Validate CpGDiscord installation and dependencies.

    Args:
        full_check: If True, also import the CpGDiscord modules

    Returns:
        List of validation issues (empty if all good)
    """
    issues = []

    for module in REQUIRED_MODULES:
        try:
            importlib.import_module(module)
        except ImportError:
            issues.append(f"Missing Python module: {module}")

    if full_check:
        try:
            from cpgdiscord.core.driver import FdrpCalculator  # noqa: F401
            from cpgdiscord.core.pipeline import FdrpPipeline  # noqa: F401
            from cpgdiscord.io.bam import open_alignment  # noqa: F401
        except ImportError as e:
            issues.append(f"CpGDiscord module import error: {e}")

    return issues
