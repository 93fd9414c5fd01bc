"""Tests for contrast ratio calculations"""

import pytest

from colour_contrast.config.defaults import WCAGThresholds
from colour_contrast.metrics.contrast import conformance_level, contrast_ratio


class TestContrastRatio:
    """Test the ratio combiner"""

    def test_maximum_contrast(self):
        """Test black against white is 21:1"""
        assert contrast_ratio(1.0, 0.0) == pytest.approx(21.0)

    def test_equal_luminance(self):
        """Test identical luminances give exactly 1"""
        assert contrast_ratio(0.5, 0.5) == 1.0

    def test_symmetric(self):
        """Test argument order does not matter"""
        assert contrast_ratio(0.2, 0.7) == contrast_ratio(0.7, 0.2)

    def test_formula(self):
        """Test (L_max + 0.05) / (L_min + 0.05)"""
        assert contrast_ratio(0.2126, 1.0) == pytest.approx(1.05 / 0.2626)

    def test_never_below_one(self):
        """Test the ratio is at least 1 across a grid of luminances"""
        grid = [i / 10 for i in range(11)]
        assert all(contrast_ratio(a, b) >= 1.0 for a in grid for b in grid)


class TestConformanceLevel:
    """Test WCAG level selection"""

    @pytest.mark.parametrize("ratio, expected", [
        (21.0, "AAA"),
        (7.0, "AAA"),
        (6.99, "AA"),
        (4.5, "AA"),
        (4.49, "Fail"),
        (1.0, "Fail"),
    ])
    def test_normal_text(self, ratio, expected):
        """Test normal text thresholds 4.5 and 7"""
        assert conformance_level(ratio) == expected

    @pytest.mark.parametrize("ratio, expected", [
        (4.5, "AAA"),
        (3.0, "AA"),
        (2.99, "Fail"),
    ])
    def test_large_text(self, ratio, expected):
        """Test large text thresholds 3 and 4.5"""
        assert conformance_level(ratio, large_text=True) == expected

    def test_custom_thresholds(self):
        """Test thresholds can be supplied"""
        strict = WCAGThresholds(aa_normal=5.0, aaa_normal=8.0)
        assert conformance_level(4.6, strict) == "Fail"
        assert conformance_level(7.5, strict) == "AA"
