import pytest
from medrecords.models.schemas import EMPTY_RECORD, FIELD_MAP, Record, coerce_age


def test_from_remote_maps_every_field(remote_record):
    record = Record.from_remote(remote_record)

    assert record.record_id == "42"
    assert record.patient_name == "John Smith"
    assert record.age == 51
    assert record.gender == "Male"
    assert record.contact_number == "555-2000"
    assert record.doctor_name == "Dr. Patel"
    assert record.diagnosis == "Hypertension"
    assert record.visit_date == "2024-02-10"


def test_from_remote_defaults_missing_fields_to_empty_string():
    record = Record.from_remote({"id": 7, "patientName": "Ann", "diagnosis": None})

    assert record.record_id == "7"
    assert record.age == ""
    assert record.diagnosis == ""
    assert record.visit_date == ""
    assert None not in record.model_dump().values()


def test_from_remote_stringifies_non_text_fields():
    record = Record.from_remote({"id": "1", "patientName": "Ann", "contactNumber": 5551000})
    assert record.contact_number == "5551000"


def test_from_remote_rejects_non_objects():
    with pytest.raises(ValueError):
        Record.from_remote(["not", "a", "record"])


def test_to_payload_uses_remote_keys_and_drops_id():
    record = Record(record_id="42", patient_name="Jane Doe", age="34", visit_date="2024-03-01")
    payload = record.to_payload()

    assert "id" not in payload
    assert set(payload) == set(FIELD_MAP.values()) - {"id"}
    assert payload["patientName"] == "Jane Doe"
    assert payload["age"] == 34
    assert payload["visitDate"] == "2024-03-01"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("34", 34),
        (" 7 ", 7),
        ("36.5", 36.5),
        ("", 0),
        (None, 0),
        (40, 40),
        ("thirty", "thirty"),
        ("4e1", 40.0),
        ("nan", "nan"),
        ("inf", "inf"),
        ("-Infinity", "-Infinity"),
        ("1e999", "1e999"),
        ("1_000", "1_000"),
        ("0x1A", "0x1A"),
    ],
)
def test_coerce_age_is_permissive(raw, expected):
    assert coerce_age(raw) == expected


def test_empty_record_is_new():
    assert EMPTY_RECORD.is_new
    assert not Record(record_id="1").is_new


def test_with_field_returns_copy():
    record = EMPTY_RECORD.with_field("patient_name", "Ann")

    assert record.patient_name == "Ann"
    assert EMPTY_RECORD.patient_name == ""


def test_with_field_rejects_unknown_names():
    with pytest.raises(KeyError):
        EMPTY_RECORD.with_field("ssn", "123")


def test_payload_with_non_finite_age_text_is_json_safe():
    import json

    payload = Record(patient_name="Ann", age="NaN").to_payload()

    assert payload["age"] == "NaN"
    json.dumps(payload, allow_nan=False)
