"""Configuration validation utilities."""

import math
from dataclasses import dataclass, fields
from typing import Any

from .defaults import LuminanceParams, WCAGThresholds

MIN_RATIO = 1.0
MAX_RATIO = 21.0

# Coefficients must sum to 1 so luminance stays within [0, 1]
COEFFICIENT_SUM_TOLERANCE = 1e-6


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def _unknown_keys(params: dict[str, Any], known: set[str]) -> list[ValidationError]:
    return [
        ValidationError(field=key, message="Unknown configuration key", value=params[key])
        for key in params
        if key not in known
    ]


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_thresholds(params: dict[str, Any]) -> list[ValidationError]:
        """Validate WCAG threshold parameters."""
        known = {f.name for f in fields(WCAGThresholds)}
        errors = _unknown_keys(params, known)

        for name in sorted(known & params.keys()):
            value = params[name]
            if not _is_number(value) or value < MIN_RATIO or value > MAX_RATIO:
                errors.append(ValidationError(
                    field=name,
                    message=f"Must be a number between {MIN_RATIO:g} and {MAX_RATIO:g}",
                    value=value
                ))

        # AAA must be at least as strict as AA
        for aaa_name, aa_name in (("aaa_normal", "aa_normal"), ("aaa_large", "aa_large")):
            aaa = params.get(aaa_name, getattr(WCAGThresholds, aaa_name))
            aa = params.get(aa_name, getattr(WCAGThresholds, aa_name))
            if _is_number(aaa) and _is_number(aa) and aaa < aa:
                errors.append(ValidationError(
                    field=aaa_name,
                    message=f"Must not be lower than {aa_name}",
                    value=aaa
                ))

        return errors

    @staticmethod
    def validate_luminance_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate relative luminance parameters."""
        known = {f.name for f in fields(LuminanceParams)}
        errors = _unknown_keys(params, known)

        for name in ("red_coefficient", "green_coefficient", "blue_coefficient"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        coefficients = [
            params.get(name, getattr(LuminanceParams, name))
            for name in ("red_coefficient", "green_coefficient", "blue_coefficient")
        ]
        if all(_is_number(c) for c in coefficients) and \
                abs(sum(coefficients) - 1.0) > COEFFICIENT_SUM_TOLERANCE:
            errors.append(ValidationError(
                field="coefficients",
                message="Red, green and blue coefficients must sum to 1",
                value=tuple(coefficients)
            ))

        if "linear_threshold" in params:
            value = params["linear_threshold"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="linear_threshold",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = _unknown_keys(config, {"thresholds", "luminance"})

        for section, validator in (
            ("thresholds", ConfigValidator.validate_thresholds),
            ("luminance", ConfigValidator.validate_luminance_params),
        ):
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validator(params))

        return errors
