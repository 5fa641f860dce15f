import pytest

from app.models.guest import Guest
from app.schemas.wedding import WeddingCreate
from app.services.guest_import_service import (
    GuestImportService,
    ParseError,
    ValidationError,
    parse_csv,
    validate_guest_row,
)
from app.services.wedding_service import WeddingService


@pytest.mark.parametrize(
    "row",
    [
        {"firstName": "Emily", "lastName": "Johnson", "phone": "5551234567"},
        {"First Name": "Emily", "Last Name": "Johnson", "Phone": "5551234567"},
        {"first_name": "Emily", "last_name": "Johnson", "phone": "5551234567"},
        {" FIRSTNAME ": "Emily", "LastName": "Johnson", "PHONE": "5551234567"},
    ],
)
def test_validator_accepts_header_variants(row):
    payload = validate_guest_row(row, wedding_id=7)

    assert payload["first_name"] == "Emily"
    assert payload["last_name"] == "Johnson"
    assert payload["phone"] == "5551234567"
    assert payload["wedding_id"] == 7


def test_validator_defaults_optional_fields_to_empty_strings():
    payload = validate_guest_row(
        {"firstName": "Emily", "lastName": "Johnson", "phone": "555"}, wedding_id=1
    )

    assert payload["email"] == ""
    assert payload["address"] == ""
    assert payload["notes"] == ""
    assert payload["rsvp_status"] == "pending"
    assert payload["guest_count"] == 1


def test_validator_ignores_wedding_id_in_row():
    payload = validate_guest_row(
        {"firstName": "A", "lastName": "B", "phone": "1", "weddingId": "99"},
        wedding_id=3,
    )

    assert payload["wedding_id"] == 3


def test_validator_falls_back_to_alternate_header_when_first_is_blank():
    payload = validate_guest_row(
        {"firstName": "", "First Name": "Emily", "lastName": "J", "phone": "1"},
        wedding_id=1,
    )

    assert payload["first_name"] == "Emily"


@pytest.mark.parametrize("missing", ["firstName", "lastName", "phone"])
def test_validator_rejects_missing_required_field(missing):
    row = {"firstName": "Emily", "lastName": "Johnson", "phone": "5551234567"}
    row[missing] = "   "

    with pytest.raises(ValidationError) as exc_info:
        validate_guest_row(row, wedding_id=1, row_number=4)

    assert exc_info.value.row == row
    assert exc_info.value.row_number == 4
    assert "row 4" in str(exc_info.value)


def test_validator_rejects_schema_violation():
    row = {"firstName": "E" * 500, "lastName": "Johnson", "phone": "5551234567"}

    with pytest.raises(ValidationError):
        validate_guest_row(row, wedding_id=1)


def test_parse_csv_reads_header_rows():
    rows = parse_csv(b"firstName,lastName,phone\nEmily,Johnson,5551234567\n")

    assert rows == [{"firstName": "Emily", "lastName": "Johnson", "phone": "5551234567"}]


def test_parse_csv_tolerates_bom():
    rows = parse_csv(b"\xef\xbb\xbfFirst Name,Last Name,Phone\nA,B,1\n")

    assert rows[0]["First Name"] == "A"


@pytest.mark.parametrize("content", [b"", b"   \n", b"firstName,lastName,phone\n"])
def test_parse_csv_empty_input_has_no_rows(content):
    assert parse_csv(content) == []


@pytest.mark.parametrize(
    "content",
    [
        b"\xff\xfe\x00bad",
        b"firstName,lastName,phone\nEmily,Johnson,555,extra\n",
        b'firstName,lastName,phone\n"Emily,Johnson,555\n',
    ],
)
def test_parse_csv_rejects_malformed_input(content):
    with pytest.raises(ParseError):
        parse_csv(content)


@pytest.fixture
def wedding(db_session, make_user):
    user = make_user()
    return WeddingService(db_session).create_wedding(
        WeddingCreate(
            bride_name="Sarah",
            groom_name="Michael",
            wedding_date="2025-06-01T00:00:00",
            venue="Rosewood Gardens",
        ),
        user_id=user.id,
    )


def test_ingest_inserts_all_rows(db_session, wedding):
    content = (
        b"firstName,lastName,phone,email\n"
        b"Emily,Johnson,5551234567,emily@example.com\n"
        b"Tom,Baker,5559876543,\n"
    )

    result = GuestImportService(db_session).ingest(wedding.id, content)

    assert result.imported_count == 2
    assert result.message == "Successfully imported 2 guests"
    assert {g.first_name for g in result.created_guests} == {"Emily", "Tom"}
    assert all(g.id is not None for g in result.created_guests)
    assert db_session.query(Guest).filter(Guest.wedding_id == wedding.id).count() == 2


def test_ingest_empty_file_imports_nothing(db_session, wedding):
    result = GuestImportService(db_session).ingest(wedding.id, b"")

    assert result.imported_count == 0
    assert result.created_guests == []


def test_ingest_is_all_or_nothing(db_session, wedding):
    content = (
        b"firstName,lastName,phone\n"
        b"Emily,Johnson,5551234567\n"
        b"Tom,Baker,\n"
    )

    with pytest.raises(ValidationError) as exc_info:
        GuestImportService(db_session).ingest(wedding.id, content)

    assert exc_info.value.row_number == 2
    assert db_session.query(Guest).count() == 0
