from gocardless_pro.enums import TolerantWireEnum


class Currency(TolerantWireEnum):
    """ISO 4217 currency codes accepted by the API."""

    UNKNOWN = "unknown"
    AUD = "AUD"
    CAD = "CAD"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    NZD = "NZD"
    SEK = "SEK"
    USD = "USD"
