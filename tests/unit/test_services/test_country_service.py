"""Tests for the country service against moto DynamoDB."""

from travote_api.lib.geo import CountryFilter
from travote_api.lib.storage import Storage
from travote_api.services.country_service import list_countries


class TestListCountries:
    """Tests for list_countries()."""

    def test_no_filter(self, seeded_storage: Storage) -> None:
        countries = list_countries(seeded_storage, CountryFilter.NONE, None, 10)
        assert {c.abbr for c in countries} == {"SG", "FJ", "NZ"}

    def test_limit(self, seeded_storage: Storage) -> None:
        assert len(list_countries(seeded_storage, CountryFilter.NONE, None, 2)) == 2

    def test_by_region(self, seeded_storage: Storage) -> None:
        countries = list_countries(seeded_storage, CountryFilter.BY_REGION, "FJ", 10)
        assert [c.name for c in countries] == ["Fiji"]

    def test_by_name(self, seeded_storage: Storage) -> None:
        countries = list_countries(seeded_storage, CountryFilter.BY_NAME, "New Zealand", 10)
        assert [c.abbr for c in countries] == ["NZ"]

    def test_numeric_string_axes_coerced(self, seeded_storage: Storage) -> None:
        (singapore,) = list_countries(seeded_storage, CountryFilter.BY_REGION, "SG", 10)
        assert singapore.xaxis == 12
        assert singapore.yaxis == 7
