"""Data model for a single contrast evaluation"""

from dataclasses import dataclass, field
from typing import Any

from ..config.defaults import WCAGThresholds
from ..metrics.contrast import conformance_level
from .colour import RGBTriple


@dataclass(frozen=True)
class ContrastReport:
    """Complete result of comparing a foreground and a background colour"""
    foreground: RGBTriple
    background: RGBTriple
    foreground_luminance: float
    background_luminance: float
    ratio: float
    thresholds: WCAGThresholds = field(default_factory=WCAGThresholds)

    def passes_aa(self, large_text: bool = False) -> bool:
        """Check WCAG 1.4.3 (Contrast Minimum)"""
        required = self.thresholds.aa_large if large_text else self.thresholds.aa_normal
        return self.ratio >= required

    def passes_aaa(self, large_text: bool = False) -> bool:
        """Check WCAG 1.4.6 (Contrast Enhanced)"""
        required = self.thresholds.aaa_large if large_text else self.thresholds.aaa_normal
        return self.ratio >= required

    def passes_non_text(self) -> bool:
        """Check WCAG 1.4.11 (Non-text Contrast)"""
        return self.ratio >= self.thresholds.non_text

    def conformance_level(self, large_text: bool = False) -> str:
        """Highest level met: 'AAA', 'AA' or 'Fail'"""
        return conformance_level(self.ratio, self.thresholds, large_text=large_text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "foreground": list(self.foreground),
            "background": list(self.background),
            "foreground_luminance": self.foreground_luminance,
            "background_luminance": self.background_luminance,
            "ratio": self.ratio,
            "ratio_rounded": round(self.ratio, 2),
            "aa": self.passes_aa(),
            "aa_large": self.passes_aa(large_text=True),
            "aaa": self.passes_aaa(),
            "aaa_large": self.passes_aaa(large_text=True),
            "non_text": self.passes_non_text(),
            "level": self.conformance_level(),
            "level_large": self.conformance_level(large_text=True),
        }
