"""Enumeration settings and presets."""
import os
from dataclasses import dataclass

from .pairs import HandPairTable
from .states import StateCounts, closed_form_counts, count_states, count_states_exhaustive, count_states_parallel

METHODS = ("suffix", "exhaustive", "closed-form")


@dataclass
class EnumerationConfig:
    method: str = "suffix"
    workers: int = 1
    chunk_size: int = 64
    preset: str = "custom"

    def validate(self) -> "EnumerationConfig":
        if self.method not in METHODS:
            raise ValueError(f"Unknown method '{self.method}'")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        if self.workers > 1 and self.method != "suffix":
            raise ValueError(f"method '{self.method}' does not support workers > 1")
        return self


def preset_enumeration(name: str) -> EnumerationConfig:
    preset = name.lower()
    if preset == "default":
        return EnumerationConfig(method="suffix", workers=1, chunk_size=64, preset="default")
    if preset == "parallel":
        return EnumerationConfig(method="suffix", workers=os.cpu_count() or 1, chunk_size=64, preset="parallel")
    if preset == "exhaustive":
        return EnumerationConfig(method="exhaustive", workers=1, chunk_size=64, preset="exhaustive")
    if preset == "check":
        return EnumerationConfig(method="closed-form", workers=1, chunk_size=64, preset="check")
    raise ValueError(f"Unknown enumeration preset '{name}'")


def run_enumeration(table: HandPairTable, cfg: EnumerationConfig) -> StateCounts:
    """Count the states of ``table`` using the method selected by ``cfg``."""

    cfg.validate()
    if cfg.method == "exhaustive":
        return count_states_exhaustive(table.pairs)
    if cfg.method == "closed-form":
        return closed_form_counts(table.pairs)
    if cfg.workers > 1:
        return count_states_parallel(table.pairs, workers=cfg.workers, chunk_size=cfg.chunk_size)
    return count_states(table.pairs)
