"""Integration tests for the pick list workflow."""

from pathlib import Path

import pytest

from picklist.errors import (
    InputReadFailure,
    InvalidLocationFormat,
    InvalidQuantity,
    InvalidShelf,
    MissingColumns,
)
from picklist.models import MergedPickEntry
from picklist.workflows import (
    PickListConfig,
    PickListResult,
    PickListWorkflow,
    run_pick_list,
)


class TestPickListConfig:
    """Tests for workflow configuration."""

    def test_default_output_path(self, tmp_path):
        config = PickListConfig(input_path=tmp_path / "picks.csv")

        assert config.output_path == Path("sorted_output.csv")
        assert config.sheet_name == 0
        assert config.include_total is True

    def test_paths_are_normalized(self, tmp_path):
        config = PickListConfig(input_path=str(tmp_path / "in.csv"), output_path=str(tmp_path / "out.csv"))

        assert isinstance(config.input_path, Path)
        assert isinstance(config.output_path, Path)

    def test_output_must_differ_from_input(self, tmp_path):
        with pytest.raises(ValueError, match="must differ"):
            PickListConfig(input_path=tmp_path / "picks.csv", output_path=tmp_path / "picks.csv")


class TestPickListWorkflow:
    """End-to-end runs over files."""

    def test_scenario(self, scenario_csv, tmp_path):
        output_path = tmp_path / "sorted.csv"

        result = run_pick_list(PickListConfig(input_path=scenario_csv, output_path=output_path))

        assert isinstance(result, PickListResult)
        assert result.rows_read == 3
        assert result.rows_written == 2
        assert result.duplicates_merged == 1
        assert result.total_quantity == 12
        assert result.run_time_seconds is not None
        assert result.run_timestamp is not None
        assert result.entries == [
            MergedPickEntry("A", 8, "A 2"),
            MergedPickEntry("B", 4, "AA 1"),
        ]
        assert output_path.read_text() == (
            "product_code,quantity,pick_location\n"
            "A,8,A 2\n"
            "B,4,AA 1\n"
        )

    def test_walking_order(self, create_test_csv_file, tmp_path):
        input_path = create_test_csv_file(
            "product_code,pick_location,quantity\n"
            "P1,AB 1,1\n"
            "P2,A 10,1\n"
            "P3,Z 1,1\n"
            "P4,A 9,1\n"
            "P5,AA 2,1\n"
        )

        result = run_pick_list(PickListConfig(input_path=input_path, output_path=tmp_path / "out.csv"))

        assert [e.pick_location for e in result.entries] == ["A 9", "A 10", "Z 1", "AA 2", "AB 1"]

    def test_excel_in_excel_out(self, create_test_excel_file, tmp_path):
        input_path = create_test_excel_file([
            {"product_code": "A", "pick_location": "A 2", "quantity": 3},
            {"product_code": "B", "pick_location": "AA 1", "quantity": 4},
            {"product_code": "A", "pick_location": "A 2", "quantity": 5},
        ])
        output_path = tmp_path / "sorted.xlsx"

        result = PickListWorkflow(PickListConfig(input_path=input_path, output_path=output_path)).execute()

        assert result.rows_written == 2
        assert output_path.exists()

    def test_excel_na_like_products_not_merged(self, create_test_excel_file, tmp_path):
        input_path = create_test_excel_file([
            {"product_code": "NA", "pick_location": "A 1", "quantity": 2},
            {"product_code": "None", "pick_location": "A 1", "quantity": 3},
        ])

        result = run_pick_list(PickListConfig(input_path=input_path, output_path=tmp_path / "out.csv"))

        assert result.entries == [
            MergedPickEntry("NA", 2, "A 1"),
            MergedPickEntry("None", 3, "A 1"),
        ]

    @pytest.mark.parametrize("bad_row,error", [
        ("C,B4,1", InvalidLocationFormat),
        ("C,B x,1", InvalidShelf),
        ("C,B 4,many", InvalidQuantity),
    ])
    def test_bad_row_aborts_without_output(self, create_test_csv_file, tmp_path, bad_row, error):
        input_path = create_test_csv_file(
            "product_code,pick_location,quantity\n"
            "A,A 2,3\n"
            f"{bad_row}\n"
        )
        output_path = tmp_path / "sorted.csv"

        with pytest.raises(error):
            run_pick_list(PickListConfig(input_path=input_path, output_path=output_path))

        assert not output_path.exists()

    def test_missing_input_file(self, tmp_path):
        output_path = tmp_path / "sorted.csv"

        with pytest.raises(InputReadFailure):
            run_pick_list(PickListConfig(input_path=tmp_path / "nope.csv", output_path=output_path))

        assert not output_path.exists()

    def test_missing_columns(self, create_test_csv_file, tmp_path):
        input_path = create_test_csv_file("sku,bin,qty\nA,A 1,1\n")

        with pytest.raises(MissingColumns):
            run_pick_list(PickListConfig(input_path=input_path, output_path=tmp_path / "out.csv"))

    def test_rerun_on_output_is_stable(self, scenario_csv, tmp_path):
        """Feeding the output back in changes nothing."""
        first = tmp_path / "first.csv"
        second = tmp_path / "second.csv"

        run_pick_list(PickListConfig(input_path=scenario_csv, output_path=first))
        result = run_pick_list(PickListConfig(input_path=first, output_path=second))

        assert result.duplicates_merged == 0
        assert second.read_text() == first.read_text()
