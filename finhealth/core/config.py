"""Configuration for a FinHealth workspace.

A workspace is a directory holding one JSON file per record collection
plus an optional ``finhealth.json`` with the settings below. Environment
variables override values from the file.
"""

import os
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from finhealth.core.exceptions import ConfigError

CONFIG_FILENAME = "finhealth.json"
DEFAULT_DATA_DIR = ".finhealth"

# Placeholder income used when nothing else is configured. There is no
# income-tracking record type, so the health score needs an external figure.
DEFAULT_MONTHLY_INCOME = Decimal("5000")


class TrackerConfig(BaseModel):
    """Settings for the health score and presentation.

    Attributes:
        monthly_income: Income used for savings and debt ratios.
        total_debt: Outstanding debt used for the debt-to-income ratio.
        currency: Display currency code.
        data_dir: Directory holding the record collections.
        recent_expense_limit: Expenses shown in the "recent" list.
        top_investment_limit: Holdings shown in the "top" list.
        monthly_budget: Overall monthly spending limit (0 = none).
    """

    monthly_income: Annotated[Decimal, Field(ge=0)] = DEFAULT_MONTHLY_INCOME
    total_debt: Annotated[Decimal, Field(ge=0)] = Decimal(0)
    monthly_budget: Annotated[Decimal, Field(ge=0)] = Decimal(0)
    currency: str = Field(default="USD", min_length=3, max_length=3, pattern=r"^[A-Z]{3}$")
    data_dir: str = DEFAULT_DATA_DIR
    recent_expense_limit: int = Field(default=5, ge=1)
    top_investment_limit: int = Field(default=3, ge=1)

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir)


_ENV_OVERRIDES = {
    "FINHEALTH_DATA_DIR": "data_dir",
    "FINHEALTH_MONTHLY_INCOME": "monthly_income",
    "FINHEALTH_TOTAL_DEBT": "total_debt",
    "FINHEALTH_MONTHLY_BUDGET": "monthly_budget",
    "FINHEALTH_CURRENCY": "currency",
}


def load_config(workspace_dir: Path | None = None) -> TrackerConfig:
    """Load configuration for a workspace directory.

    Reads ``finhealth.json`` from the directory if present, then applies
    environment overrides. When ``workspace_dir`` is given and the file
    does not set ``data_dir``, the directory itself holds the data.

    Args:
        workspace_dir: Workspace directory (default: current directory).

    Returns:
        TrackerConfig with all values resolved.

    Raises:
        ConfigError: If the file or an override cannot be parsed.
    """
    values: dict[str, object] = {}
    if workspace_dir is not None:
        values["data_dir"] = str(workspace_dir)

    base = workspace_dir or Path.cwd()
    config_file = base / CONFIG_FILENAME
    if config_file.exists():
        try:
            file_config = TrackerConfig.model_validate_json(config_file.read_text(encoding="utf-8"))
        except (PydanticValidationError, OSError) as e:
            raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e
        values.update(file_config.model_dump(exclude_unset=True))
        # Relative data_dir in the file is relative to the workspace
        if "data_dir" in file_config.model_fields_set and not file_config.data_path.is_absolute():
            values["data_dir"] = str(base / file_config.data_path)

    for env_name, field_name in _ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw:
            values[field_name] = raw

    try:
        return TrackerConfig.model_validate(values)
    except (PydanticValidationError, InvalidOperation) as e:
        raise ConfigError(f"Invalid configuration override: {e}") from e
