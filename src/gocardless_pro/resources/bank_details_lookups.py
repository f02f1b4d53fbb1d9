from __future__ import annotations

from typing import List, Optional

from gocardless_pro.enums import WireEnum
from gocardless_pro.resources.base import Resource


class BankDetailsLookupAvailableDebitScheme(WireEnum):
    """Schemes a bank account can be debited through. Strict: no UNKNOWN member."""

    AUTOGIRO = "autogiro"
    BACS = "bacs"
    BECS = "becs"
    BECS_NZ = "becs_nz"
    BETALINGSSERVICE = "betalingsservice"
    SEPA_CORE = "sepa_core"


class BankDetailsLookup(Resource):
    available_debit_schemes: Optional[List[BankDetailsLookupAvailableDebitScheme]] = None
    bank_name: Optional[str] = None
    bic: Optional[str] = None
