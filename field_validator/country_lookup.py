import logging
import threading

import pycountry

logger = logging.getLogger(__name__)


class CountryLookup:

    def __init__(self, countries=None):
        '''Build the name -> ISO alpha-2 table.
        countries: iterable of objects with alpha_2, name and optionally common_name.
        Defaults to the pycountry ISO 3166 catalog.'''
        self.lookup_dict: dict[str, str] = dict()
        self._load_countries(pycountry.countries if countries is None else countries)

    def _load_countries(self, countries) -> None:
        for country in countries:
            code = country.alpha_2
            for name in (country.name, getattr(country, "common_name", None)):
                if name:
                    self.lookup_dict[name.strip().lower()] = code
        logger.debug("Loaded %d country names", len(self.lookup_dict))

    def __len__(self) -> int:
        return len(self.lookup_dict)

    def __contains__(self, name: str) -> bool:
        return self.code_for(name) is not None

    def code_for(self, name: str | None) -> str | None:
        '''Look up a country display name, ignoring case and surrounding whitespace.
        Returns: None if not found, or the ISO 3166-1 alpha-2 code.'''
        if name is None:
            return None
        key = name.strip().lower()
        if key == "":
            return None
        return self.lookup_dict.get(key)


_shared_lookup: CountryLookup | None = None
_shared_lock = threading.Lock()


def get_country_lookup() -> CountryLookup:
    """Return the process-wide table, building it on first use."""
    global _shared_lookup
    if _shared_lookup is None:
        with _shared_lock:
            if _shared_lookup is None:
                _shared_lookup = CountryLookup()
    return _shared_lookup
