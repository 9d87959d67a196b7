"""
Unit tests for account-name validation used by @mention linkification.
"""

from hive_renderer.models import Localization
from hive_renderer.utils.validation import AccountNameValidator


def test_valid_account_names_pass():
    validator = AccountNameValidator()
    assert validator.validate_account_name("alice") is None
    assert validator.is_valid("alice.bob")
    assert validator.is_valid("good-karma")


def test_length_is_checked_first(localization):
    validator = AccountNameValidator()
    assert validator.validate_account_name("ab") == localization.account_name_wrong_length
    assert validator.validate_account_name("a" * 17) == localization.account_name_wrong_length
    assert validator.validate_account_name("") == localization.account_name_wrong_length


def test_bad_actors_are_rejected(localization):
    validator = AccountNameValidator()
    assert validator.validate_account_name("bittrexx") == localization.account_name_bad_actor


def test_segments_must_be_well_formed(localization):
    validator = AccountNameValidator()
    assert validator.validate_account_name("1alice") == localization.account_name_wrong_segment
    assert validator.validate_account_name("alice-") == localization.account_name_wrong_segment
    assert validator.validate_account_name("alice.ab") == localization.account_name_wrong_segment
    assert validator.validate_account_name("al_ice") == localization.account_name_wrong_segment


def test_bad_actor_table_is_injectable():
    validator = AccountNameValidator(bad_actors={"alice"})
    assert not validator.is_valid("alice")
    assert validator.is_valid("bittrexx")


def test_messages_follow_localization():
    localization = Localization(account_name_wrong_length="Zła długość")
    validator = AccountNameValidator(localization=localization)
    assert validator.validate_account_name("ab") == "Zła długość"
