"""Run configuration for the example data generator."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from exampledata.errors import InvalidInputError

DEFAULT_N_ROWS = 100
DEFAULT_OUTPUT = "example_data.csv"


class GeneratorConfig(BaseModel):
    """Settings for one generation run.

    ``seed`` left as ``None`` draws from a fresh, unseeded generator, so
    repeated runs produce different values with the same shape.
    """

    n_rows: int = Field(
        default=DEFAULT_N_ROWS,
        ge=0,
        strict=True,
        description="Number of records to generate.",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the random source; None leaves it unseeded.",
    )
    output: Path = Field(
        default=Path(DEFAULT_OUTPUT),
        description="Destination CSV file.",
    )

    @classmethod
    def from_json(cls, path: str | Path) -> GeneratorConfig:
        """Load a config from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            InvalidInputError: If the file is not UTF-8 text.
            pydantic.ValidationError: If the content does not describe a
                valid config.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"Config file is not UTF-8 text: {path}") from e
        return cls.model_validate_json(text)
