"""Configuration data models for Cognito batch operations."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core.config import validate_pool_id
from ..core.exceptions import ValidationError


def _validate_common(pool_id: str, timeout: float | None, concurrency: int) -> str:
    pool_id = validate_pool_id(pool_id)
    if timeout is not None and timeout <= 0:
        raise ValidationError(
            "Timeout must be a positive number of seconds",
            field="timeout",
            value=str(timeout),
        )
    if concurrency < 1:
        raise ValidationError(
            "Concurrency must be at least 1",
            field="concurrency",
            value=str(concurrency),
        )
    return pool_id


@dataclass(frozen=True)
class ExportConfig:
    """Configuration for exporting a user pool to CSV."""

    pool_id: str
    output_file: Path | None = None
    timeout: float | None = None
    concurrency: int = 1
    groups: tuple[str, ...] = field(default_factory=tuple)
    max_pages: int | None = None

    def __post_init__(self) -> None:
        """Validate the configuration."""
        object.__setattr__(
            self, "pool_id", _validate_common(self.pool_id, self.timeout, self.concurrency)
        )
        if self.max_pages is not None and self.max_pages < 1:
            raise ValidationError(
                "Maximum page count must be at least 1",
                field="max_pages",
                value=str(self.max_pages),
            )

    @property
    def writes_to_stdout(self) -> bool:
        return self.output_file is None

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary format.

        Returns:
            Dict[str, Any]: Configuration as dictionary
        """
        return {
            "pool_id": self.pool_id,
            "output_file": str(self.output_file) if self.output_file else None,
            "timeout": self.timeout,
            "concurrency": self.concurrency,
            "groups": list(self.groups),
            "max_pages": self.max_pages,
        }


@dataclass(frozen=True)
class GroupOperationConfig:
    """Configuration for adding users to or removing users from groups."""

    pool_id: str
    groups: tuple[str, ...]
    emails_file: Path
    concurrency: int = 1
    timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate the configuration."""
        object.__setattr__(
            self, "pool_id", _validate_common(self.pool_id, self.timeout, self.concurrency)
        )
        if not self.groups:
            raise ValidationError("At least one group is required", field="groups")
