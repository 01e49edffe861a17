"""Runner configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for discovery and worker scheduling.

    Loads from environment variables automatically:
        ISOTEST_MARKER_FILE, ISOTEST_TESTS_DIR, ISOTEST_EXTENSIONS,
        ISOTEST_PRIVATE_PREFIX, ISOTEST_TIMEOUT, ISOTEST_JOBS

    Or pass values directly to the constructor.
    """

    marker_file: str = Field(
        default="pyproject.toml", description="File marking the project root"
    )
    tests_dir: str = Field(default="tests", description="Tests directory below the project root")
    extensions: list[str] = Field(
        default_factory=lambda: [".py"], description="Suffixes of candidate test module files"
    )
    private_prefix: str = Field(
        default="_", min_length=1, description="Files and directories starting with this are skipped"
    )
    timeout: float | None = Field(
        default=None, gt=0, description="Per-worker deadline in seconds (None waits forever)"
    )
    jobs: int = Field(default=0, ge=0, description="Maximum concurrent workers (0 = one per module)")

    model_config = SettingsConfigDict(
        env_prefix="ISOTEST_",
        extra="ignore",
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]
