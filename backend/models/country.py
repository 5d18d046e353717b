from pydantic import BaseModel, Field

_FROZEN = {"frozen": True, "populate_by_name": True}


class NativeName(BaseModel):
    model_config = _FROZEN

    common: str
    official: str


class Name(BaseModel):
    model_config = _FROZEN

    common: str
    official: str
    native_name: dict[str, NativeName] = Field(default_factory=dict, alias="nativeName")


class Currency(BaseModel):
    model_config = _FROZEN

    name: str
    symbol: str = ""


class Idd(BaseModel):
    """International direct dialing prefix: ``root + suffix`` is a calling code."""

    model_config = _FROZEN

    root: str = ""
    suffixes: list[str] = []

    @property
    def calling_codes(self) -> list[str]:
        if not self.root:
            return []
        return [self.root + suffix for suffix in self.suffixes]


class Car(BaseModel):
    model_config = _FROZEN

    signs: list[str] = []
    side: str = ""


class CapitalInformation(BaseModel):
    model_config = _FROZEN

    latlng: list[float] | None = None


class Flag(BaseModel):
    model_config = _FROZEN

    png: str = ""
    svg: str = ""
    alt: str | None = None


class Country(BaseModel):
    """One entry of the restcountries v3.1 dataset.

    Only ``name``, ``capital``, ``languages``, ``currencies``, ``idd`` and
    ``cca3`` take part in lookups; everything else is passed through as-is.
    """

    model_config = _FROZEN

    name: Name
    tld: list[str] = []
    cca2: str = ""
    ccn3: str = ""
    cca3: str
    cioc: str = ""
    independent: bool | None = None
    status: str = ""
    un_member: bool = Field(False, alias="unMember")
    currencies: dict[str, Currency] = {}
    idd: Idd = Idd()
    capital: list[str] = []
    alt_spellings: list[str] = Field(default_factory=list, alias="altSpellings")
    region: str = ""
    subregion: str = ""
    languages: dict[str, str] = {}
    translations: dict[str, NativeName] = {}
    latlng: list[float] = []
    landlocked: bool = False
    borders: list[str] = []
    area: float = 0
    demonyms: dict[str, dict[str, str]] = {}
    flag: str = ""
    maps: dict[str, str] = {}
    population: int = 0
    gini: dict[str, float] = {}
    fifa: str = ""
    car: Car = Car()
    timezones: list[str] = []
    continents: list[str] = []
    flags: Flag = Flag()
    coat_of_arms: Flag = Field(default_factory=Flag, alias="coatOfArms")
    start_of_week: str = Field("", alias="startOfWeek")
    capital_info: CapitalInformation = Field(
        default_factory=CapitalInformation, alias="capitalInfo"
    )
    postal_code: dict[str, str | None] = Field(default_factory=dict, alias="postalCode")
