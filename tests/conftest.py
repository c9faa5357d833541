"""Pytest configuration for the rangelink test suite.

Hypothesis profiles:
- dev: local runs, 500 examples
- ci: CI runs, 50 derandomized examples
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE selects a profile explicitly; CI=true selects "ci";
otherwise "dev" is used.

Valid delimiter configurations are drawn by filtering random token sets
through validate_delimiters, so every profile tolerates heavy filtering.

Tests marked @pytest.mark.fuzz (long round-trip runs) are skipped unless
selected with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_TOLERATED = [HealthCheck.filter_too_much, HealthCheck.too_slow]

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=_PHASES,
    suppress_health_check=_TOLERATED,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    suppress_health_check=_TOLERATED,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    suppress_health_check=_TOLERATED,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ SELECTION
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="long round-trip run; use: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
