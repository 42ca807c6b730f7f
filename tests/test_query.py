"""Tests for report property validation and query-string building."""

import pytest

from simple_analytics.errors import InvalidPropertiesError
from simple_analytics.query import REQUIRED_PROPERTIES, check_properties, escape, query_string


BASE_PROPERTIES = {
    "ids": "ga:123",
    "start-date": "2020-01-01",
    "end-date": "2020-01-31",
    "metrics": "ga:sessions",
}


class TestCheckProperties:
    def test_all_required_present(self):
        check_properties(BASE_PROPERTIES)

    def test_extra_properties_allowed(self):
        check_properties({**BASE_PROPERTIES, "dimensions": "ga:date", "max-results": 50})

    @pytest.mark.parametrize("missing", REQUIRED_PROPERTIES)
    def test_missing_property_raises(self, missing):
        props = {k: v for k, v in BASE_PROPERTIES.items() if k != missing}
        with pytest.raises(InvalidPropertiesError) as exc:
            check_properties(props)
        assert "ids, start-date, end-date, metrics" in str(exc.value)

    def test_empty_mapping_raises(self):
        with pytest.raises(InvalidPropertiesError):
            check_properties({})

    def test_invalid_properties_is_value_error(self):
        with pytest.raises(ValueError):
            check_properties({"ids": "ga:1"})


class TestEscape:
    def test_unreserved_characters_untouched(self):
        assert escape("AZaz09-_.~") == "AZaz09-_.~"

    def test_reserved_characters_encoded(self):
        assert escape("ga:pagePath==/home") == "ga%3ApagePath%3D%3D%2Fhome"
        assert escape("a b,c;d") == "a%20b%2Cc%3Bd"

    def test_non_string_values(self):
        assert escape(50) == "50"

    def test_unicode_encoded_as_utf8(self):
        assert escape("é") == "%C3%A9"


class TestQueryString:
    def test_example_query(self):
        assert query_string(BASE_PROPERTIES) == (
            "end-date=2020-01-31&ids=ga%3A123&metrics=ga%3Asessions&start-date=2020-01-01"
        )

    def test_sorted_by_rendered_pair(self):
        props = {**BASE_PROPERTIES, "dimensions": "ga:date", "sort": "-ga:sessions"}
        pairs = query_string(props).split("&")
        assert pairs == sorted(pairs)
        assert "dimensions=ga%3Adate" in pairs
        assert "sort=-ga%3Asessions" in pairs

    def test_idempotent(self):
        props = {**BASE_PROPERTIES, "filters": "ga:country==Japan"}
        assert query_string(props) == query_string(dict(reversed(list(props.items()))))
        assert query_string(props) == query_string(props)
