"""Contrast ratio calculations"""

from typing import Optional

from ..config.defaults import WCAGThresholds

# Added to both luminances to account for ambient flare
FLARE = 0.05


def contrast_ratio(luminance_a: float, luminance_b: float) -> float:
    """
    Calculate the contrast ratio between two relative luminances

    ratio = (L_max + 0.05) / (L_min + 0.05)

    The result is symmetric in its arguments and lies in [1, 21].
    """
    lighter = max(luminance_a, luminance_b)
    darker = min(luminance_a, luminance_b)
    return (lighter + FLARE) / (darker + FLARE)


def conformance_level(ratio: float, thresholds: Optional[WCAGThresholds] = None,
                      large_text: bool = False) -> str:
    """
    Highest WCAG level a contrast ratio satisfies

    Args:
        ratio: Contrast ratio
        thresholds: Minimum ratios per level (defaults to WCAG 2.x values)
        large_text: Use the large-text thresholds

    Returns:
        'AAA', 'AA' or 'Fail'
    """
    thresholds = thresholds or WCAGThresholds()

    if large_text:
        aaa, aa = thresholds.aaa_large, thresholds.aa_large
    else:
        aaa, aa = thresholds.aaa_normal, thresholds.aa_normal

    if ratio >= aaa:
        return "AAA"
    if ratio >= aa:
        return "AA"
    return "Fail"
