from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnnotatorConfig:
    """
    min_primary_share: largest uppercase/bold indentation group must exceed this share of all entries
    min_secondary_share: second-largest group must exceed this share of all entries
    min_combined_share: both groups together must exceed this share of the uppercase/bold entries
    tab_width: spaces per tab when normalizing markup
    diagnose: log the diagnostics report once annotation is done
    """
    min_primary_share: float = 0.10
    min_secondary_share: float = 0.015
    min_combined_share: float = 0.50
    tab_width: int = 8
    diagnose: bool = True
