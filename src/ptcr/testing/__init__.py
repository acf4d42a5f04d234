from __future__ import annotations

from .corpus import generate_ptcr_sources, generate_records

__all__ = ["generate_ptcr_sources", "generate_records"]
