"""Tests for the editm command parser."""

import pytest

from src.core.commands.members import EditMemberCommand
from src.core.errors import (
    FormatError,
    MESSAGE_INVALID_COMMAND_FORMAT,
    SemanticError,
    ValidationError,
)
from src.core.models import EditMemberDescriptor
from src.core.parsing.parsers import parse_edit_member
from src.core.values import Address, Email, Index, Name, Phone, Tag

VALID_NAME_AMY = "Amy Bee"
VALID_PHONE_AMY = "11111111"
VALID_PHONE_BOB = "22222222"
VALID_EMAIL_AMY = "amy@example.com"
VALID_ADDRESS_AMY = "Block 312, Amy Street 1"

NAME_DESC_AMY = " n/" + VALID_NAME_AMY
PHONE_DESC_AMY = " p/" + VALID_PHONE_AMY
PHONE_DESC_BOB = " p/" + VALID_PHONE_BOB
EMAIL_DESC_AMY = " e/" + VALID_EMAIL_AMY
ADDRESS_DESC_AMY = " a/" + VALID_ADDRESS_AMY
TAG_DESC_FRIEND = " t/friend"
TAG_DESC_HUSBAND = " t/husband"
TAG_EMPTY = " t/"

INVALID_NAME_DESC = " n/James&"
INVALID_PHONE_DESC = " p/911a"
INVALID_EMAIL_DESC = " e/bob!yahoo"
INVALID_TAG_DESC = " t/hubby*"

MESSAGE_INVALID_FORMAT = MESSAGE_INVALID_COMMAND_FORMAT.format(EditMemberCommand.MESSAGE_USAGE)

INDEX_FIRST = Index.from_one_based(1)
INDEX_SECOND = Index.from_one_based(2)
INDEX_THIRD = Index.from_one_based(3)


def assert_format_error(args: str) -> None:
    with pytest.raises(FormatError) as exc_info:
        parse_edit_member(args)
    assert exc_info.value.message == MESSAGE_INVALID_FORMAT


def assert_validation_error(args: str, message: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_edit_member(args)
    assert exc_info.value.message == message


class TestEditMemberParser:
    """Tests for parse_edit_member."""

    def test_no_index_specified(self):
        assert_format_error(VALID_NAME_AMY)

    def test_no_field_specified(self):
        print("\n INPUT: '1'")
        with pytest.raises(SemanticError) as exc_info:
            parse_edit_member("1")
        print(f" OUTPUT: {exc_info.value.message}")
        assert exc_info.value.message == EditMemberCommand.MESSAGE_NOT_EDITED
        assert not isinstance(exc_info.value, FormatError)

    def test_no_index_and_no_field(self):
        assert_format_error("")

    @pytest.mark.parametrize(
        "args",
        [
            "-5" + NAME_DESC_AMY,
            "0" + NAME_DESC_AMY,
            "abc" + NAME_DESC_AMY + PHONE_DESC_BOB,
            "1 some random string",
            "1 i/ string",
        ],
        ids=["negative index", "zero index", "non-numeric index", "random preamble", "unknown prefix"],
    )
    def test_invalid_preamble(self, args):
        assert_format_error(args)

    def test_invalid_values(self):
        assert_validation_error("1" + INVALID_NAME_DESC, Name.MESSAGE_CONSTRAINTS)
        assert_validation_error("1" + INVALID_PHONE_DESC, Phone.MESSAGE_CONSTRAINTS)
        assert_validation_error("1" + INVALID_EMAIL_DESC, Email.MESSAGE_CONSTRAINTS)
        assert_validation_error("1" + INVALID_TAG_DESC, Tag.MESSAGE_CONSTRAINTS)

    def test_invalid_phone_followed_by_valid_email(self):
        assert_validation_error("1" + INVALID_PHONE_DESC + EMAIL_DESC_AMY, Phone.MESSAGE_CONSTRAINTS)

    def test_valid_phone_followed_by_invalid_phone(self):
        assert_validation_error("1" + PHONE_DESC_BOB + INVALID_PHONE_DESC, Phone.MESSAGE_CONSTRAINTS)

    def test_first_invalid_field_in_declaration_order_wins(self):
        assert_validation_error("1" + INVALID_EMAIL_DESC + INVALID_NAME_DESC + VALID_PHONE_AMY, Name.MESSAGE_CONSTRAINTS)

    def test_empty_tag_mixed_with_tags_is_invalid(self):
        assert_validation_error("1" + TAG_DESC_FRIEND + TAG_EMPTY, Tag.MESSAGE_CONSTRAINTS)

    def test_all_fields_specified(self):
        args = (
            str(INDEX_SECOND.one_based)
            + PHONE_DESC_BOB
            + TAG_DESC_HUSBAND
            + EMAIL_DESC_AMY
            + ADDRESS_DESC_AMY
            + NAME_DESC_AMY
            + TAG_DESC_FRIEND
        )
        descriptor = EditMemberDescriptor(
            name=Name(VALID_NAME_AMY),
            phone=Phone(VALID_PHONE_BOB),
            email=Email(VALID_EMAIL_AMY),
            address=Address(VALID_ADDRESS_AMY),
            tags=frozenset({Tag("husband"), Tag("friend")}),
        )
        assert parse_edit_member(args) == EditMemberCommand(INDEX_SECOND, descriptor)

    def test_only_phone_specified(self):
        result = parse_edit_member("1" + PHONE_DESC_BOB)
        assert result == EditMemberCommand(INDEX_FIRST, EditMemberDescriptor(phone=Phone(VALID_PHONE_BOB)))

    def test_only_name_specified(self):
        result = parse_edit_member("3" + NAME_DESC_AMY)
        assert result == EditMemberCommand(INDEX_THIRD, EditMemberDescriptor(name=Name(VALID_NAME_AMY)))

    def test_multiple_repeated_fields_accepts_last(self):
        result = parse_edit_member("1" + PHONE_DESC_AMY + PHONE_DESC_AMY + PHONE_DESC_BOB)
        assert result == EditMemberCommand(INDEX_FIRST, EditMemberDescriptor(phone=Phone(VALID_PHONE_BOB)))

    def test_invalid_value_followed_by_valid_value(self):
        result = parse_edit_member("1" + INVALID_PHONE_DESC + PHONE_DESC_BOB)
        assert result == EditMemberCommand(INDEX_FIRST, EditMemberDescriptor(phone=Phone(VALID_PHONE_BOB)))

        result = parse_edit_member("1" + EMAIL_DESC_AMY + INVALID_PHONE_DESC + ADDRESS_DESC_AMY + PHONE_DESC_BOB)
        expected = EditMemberDescriptor(
            phone=Phone(VALID_PHONE_BOB),
            email=Email(VALID_EMAIL_AMY),
            address=Address(VALID_ADDRESS_AMY),
        )
        assert result == EditMemberCommand(INDEX_FIRST, expected)

    def test_reset_tags(self):
        result = parse_edit_member("3" + TAG_EMPTY)
        assert result == EditMemberCommand(INDEX_THIRD, EditMemberDescriptor(tags=frozenset()))
        assert result.descriptor.is_any_field_edited()
