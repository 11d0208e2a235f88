"""Plan de numeración telefónica basado en `phonenumbers`.

Implementación:
- Interpreta los dígitos como número internacional (`+<dígitos>`).
- Solo acepta números válidos para su región (metadata de libphonenumber).
- Móviles brasileños antiguos (8 dígitos tras el código de área, antes de
  2016) se reintentan con el noveno dígito `9`; la forma canónica lo incluye.
"""

from __future__ import annotations

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumber, PhoneNumberFormat

from core.config import AppSettings
from core.interfaces.resolvers import NumberingPlanResolver
from core.logger import setup_logger

logger = setup_logger(__name__)

BRAZIL_COUNTRY_CODE = 55
_LEGACY_MOBILE_LEADING = "6789"


def _region_of(numobj: PhoneNumber) -> str:
    region = phonenumbers.region_code_for_number(numobj) or ""
    # Entidades no geográficas ("001") y región desconocida no son ISO-3166.
    if region == phonenumbers.UNKNOWN_REGION or not region.isalpha():
        return ""
    return region


def with_ninth_digit(numobj: PhoneNumber) -> PhoneNumber | None:
    """Versión de 9 dígitos de un móvil brasileño antiguo, si es válida."""

    if numobj.country_code != BRAZIL_COUNTRY_CODE:
        return None
    national = str(numobj.national_number)
    if len(national) != 10 or national[2] not in _LEGACY_MOBILE_LEADING:
        return None
    candidate = PhoneNumber(
        country_code=BRAZIL_COUNTRY_CODE,
        national_number=int(national[:2] + "9" + national[2:]),
    )
    if not phonenumbers.is_valid_number(candidate):
        return None
    return candidate


class PhoneNumbersPlanResolver(NumberingPlanResolver):
    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def _match(self, digits: str) -> PhoneNumber | None:
        try:
            numobj = phonenumbers.parse(f"+{digits}", None)
        except NumberParseException as exc:
            logger.debug("cannot parse phone %s: %s", digits, exc)
            return None

        if phonenumbers.is_valid_number(numobj):
            return numobj
        if self._settings.phone_legacy_ninth_digit:
            return with_ninth_digit(numobj)
        return None

    def country_for(self, digits: str) -> str:
        numobj = self._match(digits)
        if numobj is None:
            return ""
        return _region_of(numobj)

    def canonicalize(self, digits: str, country: str) -> str:
        numobj = self._match(digits)
        if numobj is None or _region_of(numobj) != country.upper():
            return ""
        return phonenumbers.format_number(numobj, PhoneNumberFormat.E164).lstrip("+")
