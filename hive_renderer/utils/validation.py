"""
Account name validation for @mentions.

The bad-actor table is injected so callers (and tests) can swap it for a
smaller or updated list.
"""

import re
from typing import Iterable, Optional

from ..models import DEFAULT_LOCALIZATION, Localization

_SEGMENT_START = re.compile(r"^[a-z]")
_SEGMENT_CHARS = re.compile(r"^[a-z0-9-]*$")
_SEGMENT_END = re.compile(r"[a-z0-9]$")

ACCOUNT_NAME_MIN_LENGTH = 3
ACCOUNT_NAME_MAX_LENGTH = 16
SEGMENT_MIN_LENGTH = 3

# Accounts impersonating exchanges and well-known services.
BAD_ACTOR_LIST = frozenset(
    {
        "aalpha",
        "bbittrex",
        "bihnance",
        "binanse",
        "bitrex",
        "bittex",
        "bittrax",
        "bittre",
        "bittrexx",
        "blocktraders",
        "blocttrades",
        "bloctrades",
        "blocktrade",
        "coinbasse",
        "deepcrypt0",
        "ectency",
        "ecenct",
        "hiveblog",
        "hive-wallet",
        "hivewallet",
        "hlve",
        "huobii",
        "ioniance",
        "peakd-com",
        "pokd",
        "poloniexx",
        "poloniex-com",
        "steemit-com",
        "upbitt",
    }
)


class AccountNameValidator:
    """Validate account names against length, segment and bad-actor rules."""

    def __init__(
        self,
        bad_actors: Iterable[str] = BAD_ACTOR_LIST,
        localization: Localization = DEFAULT_LOCALIZATION,
    ):
        self.bad_actors = frozenset(bad_actors)
        self.localization = localization

    def validate_account_name(self, value: Optional[str]) -> Optional[str]:
        """Return None when the name is valid, else a localized reason."""
        if not value:
            return self.localization.account_name_wrong_length
        if not ACCOUNT_NAME_MIN_LENGTH <= len(value) <= ACCOUNT_NAME_MAX_LENGTH:
            return self.localization.account_name_wrong_length
        if value in self.bad_actors:
            return self.localization.account_name_bad_actor

        for label in value.split("."):
            if not _SEGMENT_START.match(label):
                return self.localization.account_name_wrong_segment
            if not _SEGMENT_CHARS.match(label):
                return self.localization.account_name_wrong_segment
            if not _SEGMENT_END.search(label):
                return self.localization.account_name_wrong_segment
            if len(label) < SEGMENT_MIN_LENGTH:
                return self.localization.account_name_wrong_segment
        return None

    def is_valid(self, value: Optional[str]) -> bool:
        return self.validate_account_name(value) is None
