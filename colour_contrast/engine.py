"""
Contrast evaluation coordinator.

Runs the colour contrast pipeline with a loaded configuration:
Colour strings → Parsing → Relative luminance → Contrast ratio → WCAG verdicts
"""

from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError, FormatError
from .logging.config import get_evaluation_logger, log_conformance_decision
from .metrics.contrast import contrast_ratio
from .metrics.luminance import relative_luminance
from .models.report import ContrastReport
from .parsing.parsers import parse_colour

logger = structlog.get_logger(__name__)
evaluation_logger = get_evaluation_logger(__name__)


def compare_colour_contrast_ratio(colour_a: str, colour_b: str) -> float:
    """
    Compare the contrast ratio of two colour strings.

    Args:
        colour_a: Colour string ('#fff', 'rgb(...)', 'hsl(...)', ...)
        colour_b: Colour string

    Returns:
        Contrast ratio in [1, 21]; the argument order does not matter

    Raises:
        FormatError: If either colour cannot be parsed
    """
    luminance_a = relative_luminance(parse_colour(colour_a))
    luminance_b = relative_luminance(parse_colour(colour_b))
    return contrast_ratio(luminance_a, luminance_b)


class ContrastEvaluator:
    """
    Evaluates foreground/background colour pairs against WCAG thresholds.

    Configuration is resolved once at construction, with explicit overrides
    taking precedence over contrast.yaml, which takes precedence over the
    built-in defaults.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        self.logger = logger
        self.evaluation_logger = evaluation_logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        merged = self.config_loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            self.logger.error(
                "Invalid contrast configuration",
                errors=[f"{e.field}: {e.message}" for e in errors]
            )
            raise ConfigurationError(
                f"Invalid contrast configuration ({len(errors)} errors)",
                errors=errors,
                context={"config_dir": str(self.config_loader.config_dir)}
            )

        self.config = self.config_loader.build_config(merged)
        self.logger.debug(
            "Contrast evaluator initialized",
            thresholds=merged["thresholds"],
            luminance=merged["luminance"]
        )

    def ratio(self, foreground: str, background: str) -> float:
        """Contrast ratio of two colour strings using the configured luminance model."""
        return self.evaluate(foreground, background).ratio

    def evaluate(self, foreground: str, background: str) -> ContrastReport:
        """
        Evaluate a colour pair.

        Args:
            foreground: Text or UI colour string
            background: Background colour string

        Returns:
            ContrastReport with parsed colours, luminances, ratio and verdict helpers

        Raises:
            FormatError: If either colour cannot be parsed
        """
        try:
            fg_rgb = parse_colour(foreground)
            bg_rgb = parse_colour(background)
        except FormatError as e:
            self.logger.debug(
                "Contrast evaluation aborted",
                foreground=repr(foreground),
                background=repr(background),
                error=str(e)
            )
            raise

        fg_luminance = relative_luminance(fg_rgb, self.config.luminance)
        bg_luminance = relative_luminance(bg_rgb, self.config.luminance)

        report = ContrastReport(
            foreground=fg_rgb,
            background=bg_rgb,
            foreground_luminance=fg_luminance,
            background_luminance=bg_luminance,
            ratio=contrast_ratio(fg_luminance, bg_luminance),
            thresholds=self.config.thresholds,
        )

        self.logger.debug(
            "Contrast evaluated",
            foreground=foreground,
            background=background,
            ratio=report.ratio
        )
        return report

    def check(self, foreground: str, background: str, large_text: bool = False) -> bool:
        """
        Check a colour pair against WCAG AA and log the verdict.

        Returns:
            True if the pair meets AA for the given text size
        """
        report = self.evaluate(foreground, background)
        thresholds = self.config.thresholds
        required = thresholds.aa_large if large_text else thresholds.aa_normal
        passed = report.passes_aa(large_text=large_text)

        log_conformance_decision(
            self.evaluation_logger,
            level="AA-large" if large_text else "AA",
            passed=passed,
            ratio=report.ratio,
            required=required,
            context={"foreground": foreground, "background": background}
        )
        return passed
