from dataclasses import dataclass
from typing import Tuple


# Searched in this order, relative to the directory the validator runs in.
# The first file that exists wins, later ones are never read.
CANDIDATE_PATHS = (
    "renovate.json",
    ".renovaterc.json",
    ".github/renovate.json",
)

REQUIRED_FIELDS = (
    "extends",
    "packageRules",
)

RECOMMENDED_EXTENDS = (
    "config:recommended",
    ":dependencyDashboard",
    ":semanticCommits",
)

DEFAULT_TIMEZONE_LABEL = "Default (UTC)"


@dataclass(frozen=True)
class ValidatorSettings:
    candidates: Tuple[str, ...] = CANDIDATE_PATHS
    required_fields: Tuple[str, ...] = REQUIRED_FIELDS
    recommended_extends: Tuple[str, ...] = RECOMMENDED_EXTENDS


DEFAULT_SETTINGS = ValidatorSettings()
