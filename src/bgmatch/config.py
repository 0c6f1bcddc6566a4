"""Loading and saving match rules.

Rules are stored as a flat JSON object keyed by field name:

    {"points": 5, "beaver": true, "crawford": true, "murphy": true, "murphy_limit": 3}

Missing fields take their default value. Unknown keys, wrongly typed values
and inconsistent option combinations are rejected.
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bgmatch.core.rules import Rules, MAX_POINTS, MAX_MURPHY_LIMIT
from bgmatch.exceptions import ConfigError, InvalidRulesError

logger = logging.getLogger(__name__)


class RulesConfig(BaseModel):
    """Schema of a rules file.

    Field ranges are the storage widths (32-bit points, 8-bit Murphy limit).
    Cross-field consistency is left to ``Rules.problems()``.
    """

    model_config = ConfigDict(strict=True, extra="forbid")

    points: int = Field(default=Rules.points, ge=0, le=MAX_POINTS)
    beaver: bool = Rules.beaver
    raccoon: bool = Rules.raccoon
    murphy: bool = Rules.murphy
    murphy_limit: int = Field(default=Rules.murphy_limit, ge=0, le=MAX_MURPHY_LIMIT)
    jacoby: bool = Rules.jacoby
    crawford: bool = Rules.crawford
    holland: bool = Rules.holland


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(item) for item in err["loc"]) or "rules"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def rules_to_dict(rules: Rules) -> Dict[str, Any]:
    """Convert rules to a plain dict."""
    return asdict(rules)


def rules_from_dict(data: Dict[str, Any], validate: bool = True) -> Rules:
    """Build rules from a dict.

    Args:
        data: Field name -> value; absent fields keep their default
        validate: Also check the option combination for consistency

    Returns:
        Rules built from the dict

    Raises:
        ConfigError: If a key is unknown or a value has the wrong type or range
        InvalidRulesError: If validate is set and the rules are inconsistent
    """
    try:
        config = RulesConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid rules config: {_describe(e)}") from e

    rules = Rules(**config.model_dump())
    if validate:
        rules.validate()
    return rules


def load_rules(path: Union[str, Path], validate: bool = True) -> Rules:
    """Load rules from a JSON file.

    Args:
        path: File to read
        validate: Also check the option combination for consistency

    Returns:
        Rules read from the file

    Raises:
        ConfigError: If the file cannot be read or parsed
        InvalidRulesError: If validate is set and the rules are inconsistent
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read rules file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Rules file {path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Rules file {path} is not valid JSON: {e}") from e

    try:
        rules = rules_from_dict(data, validate=validate)
    except (ConfigError, InvalidRulesError) as e:
        logger.debug("Rejected rules file %s: %s", path, e)
        raise
    logger.debug("Loaded rules from %s: %s", path, rules)
    return rules


def save_rules(rules: Rules, path: Union[str, Path]) -> Path:
    """Write rules to a JSON file.

    Args:
        rules: Rules to save
        path: Destination file; parent directories are created

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(rules_to_dict(rules), f, indent=2)
        f.write("\n")
    logger.debug("Saved rules to %s", path)
    return path
