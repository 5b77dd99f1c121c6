from .country_table import CountryTable
from .title_bar import TitleBar

__all__ = ["CountryTable", "TitleBar"]
