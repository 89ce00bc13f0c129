"""Shared fixtures."""

import pytest

from range_chart.analysis.chart import ChartBuilder
from range_chart.analysis.combos import ComboTable


@pytest.fixture(scope="session")
def combo_table():
    return ComboTable.build()


@pytest.fixture(scope="session")
def builder(combo_table):
    return ChartBuilder(table=combo_table)
