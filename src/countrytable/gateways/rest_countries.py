import requests
from loguru import logger

from countrytable.config import DEFAULT_ENDPOINT_URL
from countrytable.services.country_list import Country


class CountriesFetchError(RuntimeError):
    """Raised when the country list cannot be fetched or decoded."""


class RestCountries:
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    timeout: float = 10.0

    @classmethod
    def set_endpoint_url(cls, endpoint_url: str | None) -> None:
        cls.endpoint_url = endpoint_url or DEFAULT_ENDPOINT_URL

    @classmethod
    def set_timeout(cls, timeout: float | None) -> None:
        cls.timeout = timeout or 10.0

    # -------------------------Parse------------------------- #

    @staticmethod
    def parse_name(raw_name) -> str | None:
        """Read a country name from either the v2 (plain string) or v3 ({"common": ...}) shape."""
        if isinstance(raw_name, dict):
            raw_name = raw_name.get("common")
        if isinstance(raw_name, str) and raw_name.strip():
            return raw_name
        return None

    @staticmethod
    def parse_number(value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value

    @staticmethod
    def parse_gini(value):
        # v3 reports gini as {"<year>": value}; take the most recent year
        if isinstance(value, dict) and value:
            value = value[max(value)]
        return RestCountries.parse_number(value)

    @staticmethod
    def parse_country(item: dict) -> Country | None:
        """Build a Country from one JSON object, or None when it has no usable name."""
        if not isinstance(item, dict):
            return None
        name = RestCountries.parse_name(item.get("name"))
        if name is None:
            return None

        population = RestCountries.parse_number(item.get("population"))
        return Country(
            name=name,
            population=int(population) if population is not None else 0,
            area=RestCountries.parse_number(item.get("area")),
            gini=RestCountries.parse_gini(item.get("gini")),
        )

    @staticmethod
    def parse_countries(payload) -> list[Country]:
        if not isinstance(payload, list):
            raise CountriesFetchError(f"Expected a JSON array of countries, got {type(payload).__name__}")

        countries = []
        for index, item in enumerate(payload):
            country = RestCountries.parse_country(item)
            if country is None:
                logger.warning(f"Skipping country record {index}: no usable name")
                continue
            countries.append(country)
        return countries

    # -------------------------Fetch------------------------- #

    @classmethod
    def list_countries(cls, *, endpoint_url: str = None, timeout: float = None) -> list[Country]:
        """Fetch the full country list in one request."""
        url = endpoint_url or cls.endpoint_url
        logger.info(f"Fetching countries from '{url}'")
        try:
            response = requests.get(url, timeout=timeout or cls.timeout, headers={"Accept": "application/json"})
            response.raise_for_status()
            payload = response.json()
        except ValueError as e:
            # requests' JSONDecodeError is also a RequestException, so this goes first
            raise CountriesFetchError(f"Response from {url} is not valid JSON: {e}") from e
        except requests.RequestException as e:
            raise CountriesFetchError(f"Request to {url} failed: {e}") from e

        countries = cls.parse_countries(payload)
        logger.info(f"Fetched {len(countries)} countries")
        return countries
