from countrytable.gateways.rest_countries import RestCountries
from countrytable.services.country_list import Country


class CountryListService:
    @classmethod
    def list_countries(cls) -> list[Country]:
        """Fetch every country from the configured endpoint."""

        return RestCountries.list_countries()
