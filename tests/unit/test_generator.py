"""Tests for exampledata.generator: dataset generation and the generator class."""
import numpy as np
import pandas as pd
import pytest

from exampledata.config import GeneratorConfig
from exampledata.errors import InvalidInputError
from exampledata.generator import ExampleDataGenerator, generate_dataset
from exampledata.schema import COLUMNS, SHAPE_CATEGORIES, SHAPE_DTYPE


# ---------------------------------------------------------------------------
# generate_dataset
# ---------------------------------------------------------------------------


class TestGenerateDataset:
    def test_row_count_and_columns(self, example_df):
        assert len(example_df) == 100
        assert list(example_df.columns) == list(COLUMNS)

    @pytest.mark.parametrize("n", [1, 2, 37])
    def test_arbitrary_sizes(self, n):
        df = generate_dataset(n, rng=0)
        assert len(df) == n
        assert list(df.columns) == list(COLUMNS)

    def test_dtypes(self, example_df):
        for col in ("X", "Z", "U", "Y"):
            assert example_df[col].dtype == np.float64
        assert example_df["Shape"].dtype == SHAPE_DTYPE

    def test_response_matches_formula(self, example_df):
        x, z, u = example_df["X"], example_df["Z"], example_df["U"]
        expected = 2 * x - 0.5 * x**2 + z + 0.25 * (x * z) + u
        np.testing.assert_allclose(example_df["Y"], expected, rtol=1e-9)

    def test_shape_labels_from_category_set(self, example_df):
        assert set(example_df["Shape"].astype(str)) <= set(SHAPE_CATEGORIES)

    def test_shape_categories_are_ordered(self, example_df):
        assert example_df["Shape"].cat.ordered
        assert list(example_df["Shape"].cat.categories) == ["Circle", "Square", "Triangle"]

    def test_all_shapes_drawn(self, example_df):
        assert example_df["Shape"].value_counts().min() > 0

    def test_no_nulls(self, example_df):
        assert example_df.isna().sum().sum() == 0

    def test_zero_rows_keeps_schema(self):
        df = generate_dataset(0)
        assert len(df) == 0
        assert list(df.columns) == list(COLUMNS)
        assert df["Shape"].dtype == SHAPE_DTYPE

    def test_numpy_integer_accepted(self):
        assert len(generate_dataset(np.int64(4), rng=1)) == 4

    @pytest.mark.parametrize("n", [-1, 1.5, 2.0, "10", None, True])
    def test_invalid_size_rejected(self, n):
        with pytest.raises(InvalidInputError):
            generate_dataset(n)

    def test_invalid_size_is_value_error(self):
        with pytest.raises(ValueError):
            generate_dataset(-1)

    def test_unseeded_default(self):
        df = generate_dataset(10)
        assert len(df) == 10
        assert set(df["Shape"].astype(str)) <= set(SHAPE_CATEGORIES)


# ---------------------------------------------------------------------------
# Random source
# ---------------------------------------------------------------------------


class TestRandomSource:
    def test_reproducibility_with_seed(self):
        pd.testing.assert_frame_equal(generate_dataset(50, rng=123), generate_dataset(50, rng=123))

    def test_seed_and_generator_equivalent(self):
        pd.testing.assert_frame_equal(
            generate_dataset(20, rng=5),
            generate_dataset(20, rng=np.random.default_rng(5)),
        )

    def test_different_seeds_differ(self):
        a = generate_dataset(20, rng=1)
        b = generate_dataset(20, rng=2)
        assert not np.allclose(a["X"], b["X"])

    def test_shared_generator_advances(self):
        rng = np.random.default_rng(11)
        a = generate_dataset(20, rng=rng)
        b = generate_dataset(20, rng=rng)
        assert not np.allclose(a["X"], b["X"])


class TestDistributions:
    """Loose moment checks on a large sample."""

    @pytest.fixture(scope="class")
    def large_df(self):
        return generate_dataset(20000, rng=2024)

    def test_x_normal_10_1(self, large_df):
        assert large_df["X"].mean() == pytest.approx(10, abs=0.05)
        assert large_df["X"].std() == pytest.approx(1, abs=0.05)

    def test_z_uniform_10_20(self, large_df):
        assert large_df["Z"].min() >= 10
        assert large_df["Z"].max() <= 20
        assert large_df["Z"].mean() == pytest.approx(15, abs=0.1)

    def test_u_standard_normal(self, large_df):
        assert large_df["U"].mean() == pytest.approx(0, abs=0.05)
        assert large_df["U"].std() == pytest.approx(1, abs=0.05)

    def test_shapes_roughly_uniform(self, large_df):
        shares = large_df["Shape"].value_counts(normalize=True)
        for label in SHAPE_CATEGORIES:
            assert shares[label] == pytest.approx(1 / 3, abs=0.03)


# ---------------------------------------------------------------------------
# ExampleDataGenerator
# ---------------------------------------------------------------------------


class TestExampleDataGenerator:
    def test_default_config(self):
        gen = ExampleDataGenerator()
        assert gen.config.n_rows == 100
        assert len(gen.generate()) == 100

    def test_uses_config_rows(self):
        gen = ExampleDataGenerator(GeneratorConfig(n_rows=12, seed=3))
        assert len(gen.generate()) == 12

    def test_seeded_config_reproducible(self):
        config = GeneratorConfig(n_rows=30, seed=8)
        pd.testing.assert_frame_equal(
            ExampleDataGenerator(config).generate(),
            ExampleDataGenerator(config).generate(),
        )

    def test_matches_generate_dataset(self):
        config = GeneratorConfig(n_rows=15, seed=21)
        pd.testing.assert_frame_equal(
            ExampleDataGenerator(config).generate(),
            generate_dataset(15, rng=21),
        )

    def test_generate_and_save_default_path(self, tmp_path):
        out = tmp_path / "example_data.csv"
        gen = ExampleDataGenerator(GeneratorConfig(n_rows=10, seed=1, output=out))
        df = gen.generate_and_save()
        assert out.exists()
        assert len(df) == 10
        assert len(out.read_text().splitlines()) == 11

    def test_generate_and_save_explicit_path(self, tmp_path):
        out = tmp_path / "other.csv"
        ExampleDataGenerator(GeneratorConfig(n_rows=3, seed=1)).generate_and_save(out)
        assert out.exists()

    def test_generate_and_save_missing_dir(self, tmp_path):
        gen = ExampleDataGenerator(GeneratorConfig(n_rows=3))
        with pytest.raises(FileNotFoundError):
            gen.generate_and_save(tmp_path / "missing" / "data.csv")
