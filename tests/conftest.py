import pytest

from countrytable.services.country_list import Country

# (name, population, area, gini), deliberately not in alphabetical order
COUNTRY_ROWS = [
    ("Zimbabwe", 14862927, 390757, 43.2),
    ("Brazil", 212559409, 8515767, 53.4),
    ("United States", 329484123, 9629091, 41.4),
    ("Åland Islands", 28875, 1580, None),
    ("Argentina", 45376763, 2780400, 42.9),
    ("Nepal", 29136808, 147181, 32.8),
    ("Chile", 19116209, 756102, 44.4),
    ("United Kingdom", 67215293, 242900, 35.1),
    ("Denmark", 5831404, 43094, 28.2),
    ("Egypt", 102334403, 1002450, 31.5),
    ("France", 67391582, 551695, 32.4),
    ("Germany", 83240525, 357114, 31.9),
    ("Holy See", 801, 0.44, None),
    ("India", 1380004385, 3287590, 35.7),
    ("Japan", 125836021, 377930, 32.9),
    ("Kenya", 53771300, 580367, 40.8),
    ("Laos", 7275556, 236800, 38.8),
    ("Mexico", 128932753, 1964375, 45.4),
    ("Norway", 5379475, 323802, 27.6),
    ("Oman", 5106622, 309500, None),
    ("Peru", 32971846, 1285216, 41.5),
    ("Qatar", 2881060, 11586, None),
    ("Romania", 19286123, 238391, 35.9),
    ("Spain", 47351567, 505992, 34.7),
    ("Thailand", 69799978, 513120, 36.4),
    ("Uganda", 45741000, 241550, 42.8),
    ("Vietnam", 97338583, 331212, 35.7),
    ("Yemen", 29825968, 527968, 36.7),
    ("Zambia", 18383956, 752612, 57.1),
    ("United Arab Emirates", 9890400, 83600, 26.0),
    ("Belgium", 11555997, 30528, 27.2),
    ("Canada", 38005238, 9984670, 33.3),
    ("Antarctica", 1000, 14000000, None),
    ("Bouvet Island", 0, 49, None),
    ("Finland", 5530719, 338424, 27.3),
    ("Greece", 10715549, 131990, 32.9),
    ("Iceland", 366425, 103000, 26.1),
    ("Jamaica", 2961161, 10991, 45.5),
    ("Malta", 525285, 316, 28.7),
    ("Portugal", 10305564, 92090, 33.5),
]


@pytest.fixture
def countries() -> list[Country]:
    return [Country(name, population, area, gini) for name, population, area, gini in COUNTRY_ROWS]


@pytest.fixture
def country_payload() -> list[dict]:
    """The same countries as the REST Countries v2 endpoint returns them."""
    return [
        {"name": name, "population": population, "area": area, "gini": gini}
        for name, population, area, gini in COUNTRY_ROWS
    ]
