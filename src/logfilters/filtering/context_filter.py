"""
Diagnostic context based log filtering

Unlike the level and string filters, these filters render a verdict on
mismatch as well: once the empty-value guards pass, a mismatch yields the
opposite of the match result.
"""

from ..event import LogEvent
from .base import Filter, FilterResult
from .properties import Properties, get_bool, get_property


def _verdict(matched: bool, accept_on_match: bool) -> FilterResult:
    if matched == accept_on_match:
        return FilterResult.ACCEPT
    return FilterResult.DENY


class NDCMatchFilter(Filter):
    """Filter on the nested diagnostic context of the event"""

    def __init__(
        self,
        ndc_to_match: str = "",
        accept_on_match: bool = True,
        neutral_on_empty: bool = True,
    ):
        super().__init__()
        self.ndc_to_match = ndc_to_match or ""
        self.accept_on_match = accept_on_match
        self.neutral_on_empty = neutral_on_empty

    def decide(self, event: LogEvent) -> FilterResult:
        ndc = event.get_ndc()

        if self.neutral_on_empty and (not self.ndc_to_match or not ndc):
            return FilterResult.NEUTRAL

        return _verdict(ndc == self.ndc_to_match, self.accept_on_match)

    @classmethod
    def from_properties(cls, properties: Properties) -> "NDCMatchFilter":
        return cls(
            ndc_to_match=get_property(properties, "NDCToMatch"),
            accept_on_match=get_bool(properties, "AcceptOnMatch", True),
            neutral_on_empty=get_bool(properties, "NeutralOnEmpty", True),
        )

    def __repr__(self) -> str:
        return (
            f"NDCMatchFilter(ndc_to_match={self.ndc_to_match!r}, "
            f"accept_on_match={self.accept_on_match}, "
            f"neutral_on_empty={self.neutral_on_empty})"
        )


class MDCMatchFilter(Filter):
    """Filter on one key of the mapped diagnostic context of the event"""

    def __init__(
        self,
        mdc_key_to_match: str = "",
        mdc_value_to_match: str = "",
        accept_on_match: bool = True,
        neutral_on_empty: bool = True,
    ):
        super().__init__()
        self.mdc_key_to_match = mdc_key_to_match or ""
        self.mdc_value_to_match = mdc_value_to_match or ""
        self.accept_on_match = accept_on_match
        self.neutral_on_empty = neutral_on_empty

    def decide(self, event: LogEvent) -> FilterResult:
        if self.neutral_on_empty and (
            not self.mdc_key_to_match or not self.mdc_value_to_match
        ):
            return FilterResult.NEUTRAL

        value = event.get_mdc(self.mdc_key_to_match)

        if self.neutral_on_empty and not value:
            return FilterResult.NEUTRAL

        return _verdict(value == self.mdc_value_to_match, self.accept_on_match)

    @classmethod
    def from_properties(cls, properties: Properties) -> "MDCMatchFilter":
        return cls(
            mdc_key_to_match=get_property(properties, "MDCKeyToMatch"),
            mdc_value_to_match=get_property(properties, "MDCValueToMatch"),
            accept_on_match=get_bool(properties, "AcceptOnMatch", True),
            neutral_on_empty=get_bool(properties, "NeutralOnEmpty", True),
        )

    def __repr__(self) -> str:
        return (
            f"MDCMatchFilter(key={self.mdc_key_to_match!r}, "
            f"value={self.mdc_value_to_match!r}, "
            f"accept_on_match={self.accept_on_match}, "
            f"neutral_on_empty={self.neutral_on_empty})"
        )
