"""Default configuration parameters for contrast evaluation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WCAGThresholds:
    """Minimum contrast ratios for the WCAG 2.x success criteria."""
    aa_normal: float = 4.5                # 1.4.3 body text
    aa_large: float = 3.0                 # 1.4.3 large text (18pt, or 14pt bold)
    aaa_normal: float = 7.0               # 1.4.6 body text
    aaa_large: float = 4.5                # 1.4.6 large text
    non_text: float = 3.0                 # 1.4.11 UI components and graphics


@dataclass(frozen=True)
class LuminanceParams:
    """sRGB relative luminance parameters."""
    red_coefficient: float = 0.2126
    green_coefficient: float = 0.7152
    blue_coefficient: float = 0.0722
    linear_threshold: float = 0.03928     # Upper bound of the linear toe segment

    @property
    def coefficients(self) -> tuple[float, float, float]:
        return (self.red_coefficient, self.green_coefficient, self.blue_coefficient)


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    thresholds: WCAGThresholds
    luminance: LuminanceParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        thresholds=WCAGThresholds(),
        luminance=LuminanceParams(),
    )
