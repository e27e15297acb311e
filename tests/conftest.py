"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pandas as pd
import pytest

from picklist.models import PickEntry


@pytest.fixture
def scenario_rows():
    """Three rows where one product appears twice at the same location."""
    return [
        {"product_code": "A", "pick_location": "A 2", "quantity": "3"},
        {"product_code": "B", "pick_location": "AA 1", "quantity": "4"},
        {"product_code": "A", "pick_location": "A 2", "quantity": "5"},
    ]


@pytest.fixture
def scenario_entries(scenario_rows):
    """scenario_rows as PickEntry models."""
    return [PickEntry(**row) for row in scenario_rows]


@pytest.fixture
def create_test_csv_file(tmp_path):
    """Factory fixture to create CSV pick lists from raw text."""
    def _create_file(content: str, filename: str = "picks.csv") -> Path:
        """Write content to a CSV file and return its path."""
        file_path = tmp_path / filename
        file_path.write_text(content)
        return file_path

    return _create_file


@pytest.fixture
def create_test_excel_file(tmp_path):
    """Factory fixture to create Excel pick lists with specified data."""
    def _create_file(data: list[dict], filename: str = "picks.xlsx", sheet_name: str = "Sheet1") -> Path:
        """Create an Excel file with the given rows.

        Args:
            data: List of dictionaries representing rows
            filename: Name of the Excel file
            sheet_name: Worksheet name

        Returns:
            Path to the created file
        """
        file_path = tmp_path / filename
        with pd.ExcelWriter(file_path, engine="openpyxl") as writer:
            pd.DataFrame(data).to_excel(writer, sheet_name=sheet_name, index=False)
        return file_path

    return _create_file


@pytest.fixture
def scenario_csv(create_test_csv_file):
    """CSV version of scenario_rows."""
    return create_test_csv_file(
        "product_code,pick_location,quantity\n"
        "A,A 2,3\n"
        "B,AA 1,4\n"
        "A,A 2,5\n"
    )
