"""Locale value type selecting the API subdomain."""

from dataclasses import dataclass

DEFAULT_COUNTRY = "world"


@dataclass(frozen=True)
class Locale:
    """Country code with an optional language code.

    The country code is a lowercase ISO 3166-1 code or the special value
    "world". The language code is a lowercase ISO 639-1 code. An empty
    country code falls back to the default locale.
    """

    cc: str = DEFAULT_COUNTRY
    lc: str | None = None

    def __post_init__(self) -> None:
        if not self.cc:
            object.__setattr__(self, "cc", DEFAULT_COUNTRY)
            object.__setattr__(self, "lc", None)
        elif not self.lc:
            object.__setattr__(self, "lc", None)

    @classmethod
    def parse(cls, text: str) -> "Locale":
        """Parse a locale from "{cc}" or "{cc}-{lc}"."""
        cc, _, rest = text.partition("-")
        lc = rest.split("-", 1)[0]
        return cls(cc=cc, lc=lc or None)

    def __str__(self) -> str:
        if self.lc:
            return f"{self.cc}-{self.lc}"
        return self.cc
