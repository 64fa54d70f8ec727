"""exampledata: synthetic example dataset for a statistics walkthrough."""

from exampledata.config import GeneratorConfig
from exampledata.errors import InvalidInputError
from exampledata.generator import ExampleDataGenerator, generate_dataset, write_dataset
from exampledata.loader import load_dataset
from exampledata.schema import (
    COLUMNS,
    EXAMPLE_DATA_SCHEMA,
    SHAPE_CATEGORIES,
    SHAPE_DTYPE,
    empty_frame,
    response,
)
from exampledata.validator import DatasetValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "COLUMNS",
    "DatasetValidator",
    "EXAMPLE_DATA_SCHEMA",
    "ExampleDataGenerator",
    "GeneratorConfig",
    "InvalidInputError",
    "SHAPE_CATEGORIES",
    "SHAPE_DTYPE",
    "ValidationResult",
    "empty_frame",
    "generate_dataset",
    "load_dataset",
    "response",
    "write_dataset",
]
