"""Date/time and field validation helpers injected into the business layer."""
from __future__ import annotations

from typing import Any, Optional

from . import dates, validation


class GenericHelpers:
    """Single object exposing both helper modules.

    Services receive one of these so tests can hand in a replacement
    without patching module globals.
    """

    # date/time
    current_utc = staticmethod(dates.current_utc)
    to_local = staticmethod(dates.to_local)
    to_utc = staticmethod(dates.to_utc)
    format_datetime = staticmethod(dates.format_datetime)
    calculate_age = staticmethod(dates.calculate_age)
    is_weekend = staticmethod(dates.is_weekend)
    is_business_hour = staticmethod(dates.is_business_hour)

    # validation
    is_valid_phone_number = staticmethod(validation.is_valid_phone_number)
    is_valid_email = staticmethod(validation.is_valid_email)
    is_strong_password = staticmethod(validation.is_strong_password)
    is_valid_url = staticmethod(validation.is_valid_url)
    is_valid_ip = staticmethod(validation.is_valid_ip)
    is_valid_credit_card = staticmethod(validation.is_valid_credit_card)
    is_valid_identity_number = staticmethod(validation.is_valid_identity_number)

    def validate(self, serializer_class, data: Any, *, partial: bool = False) -> tuple[bool, Optional[dict]]:
        s = serializer_class(data=data, partial=partial)
        if s.is_valid():
            return True, None
        return False, dict(s.errors)


__all__ = ['GenericHelpers', 'dates', 'validation']
