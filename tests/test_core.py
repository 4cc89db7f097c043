"""Tests for core chart generation."""

import pytest

from chart_lens import generate_chart, sample_series, sample_url
from chart_lens.exceptions import HTTPStatusError
from chart_lens.fetch import FetchConfig
from chart_lens.normalization import NormalizationConfig


def test_generate_chart_normalizes_fetched_payload(mocker):
    fetch = mocker.patch(
        "chart_lens.core.fetch_json",
        return_value=[
            {"country": "USA", "cases": 111_820_082},
            {"country": "India", "cases": 45_035_393},
        ],
    )

    result = generate_chart(
        "https://disease.sh/v3/covid-19/countries?sort=cases",
        "bar",
        fetch_config=FetchConfig(timeout_sec=1.0),
    )

    assert result.labels == ["USA", "India"]
    assert result.values == [112, 45]
    assert result.magnitude_suffix == "million"
    fetch.assert_called_once_with(
        "https://disease.sh/v3/covid-19/countries?sort=cases",
        config=FetchConfig(timeout_sec=1.0),
    )


def test_generate_chart_map_payload_pie(mocker):
    mocker.patch(
        "chart_lens.core.fetch_json",
        return_value={"JavaScript": 4_200_000, "HTML": 9_000, "CSS": 1_200},
    )

    result = generate_chart("https://api.github.com/repos/facebook/react/languages", "proportional")

    assert result.mode == "pie"
    assert [item.label for item in result.slices] == ["JavaScrip", "HTML", "CSS"]
    assert [item.value for item in result.slices] == [4_200_000, 9_000, 1_200]


def test_generate_chart_uses_config(mocker):
    mocker.patch("chart_lens.core.fetch_json", return_value={"a": 5_000_000_000})

    result = generate_chart(
        "https://example.com/data",
        "bar",
        config=NormalizationConfig(uniform_magnitude=True),
    )

    assert result.magnitude_suffix == "billion"


def test_generate_chart_unchartable_payload_returns_sample(mocker):
    mocker.patch("chart_lens.core.fetch_json", return_value="just text")

    result = generate_chart("https://example.com/data", "bar")

    assert result == sample_series("bar")


def test_generate_chart_rejects_unknown_mode_before_fetch(mocker):
    fetch = mocker.patch("chart_lens.core.fetch_json")

    with pytest.raises(ValueError):
        generate_chart("https://example.com/data", "scatter")

    fetch.assert_not_called()


def test_generate_chart_propagates_fetch_errors(mocker):
    mocker.patch(
        "chart_lens.core.fetch_json",
        side_effect=HTTPStatusError(500, "https://example.com/data"),
    )

    with pytest.raises(HTTPStatusError):
        generate_chart("https://example.com/data", "bar")


def test_sample_url_by_mode():
    assert sample_url("bar") == "https://disease.sh/v3/covid-19/countries?sort=cases"
    assert sample_url("pie") == "https://api.github.com/repos/facebook/react/languages"
    assert sample_url("categorical") == sample_url("bar")
