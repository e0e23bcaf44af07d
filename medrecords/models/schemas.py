"""Pydantic schemas for patient visit records.

The local shape uses snake_case names bound to the form; the remote
collection resource uses camelCase. FIELD_MAP is the single place the
two are tied together.
"""
import math
import re
from typing import Any, Dict, Union
from pydantic import BaseModel, ConfigDict, field_validator


# local name -> remote name
FIELD_MAP: Dict[str, str] = {
    "record_id": "id",
    "patient_name": "patientName",
    "age": "age",
    "gender": "gender",
    "contact_number": "contactNumber",
    "doctor_name": "doctorName",
    "diagnosis": "diagnosis",
    "visit_date": "visitDate",
}

GENDER_CHOICES = ("", "Male", "Female", "Other")

_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def coerce_age(value: Any) -> Any:
    """Best-effort numeric conversion of the age input.

    Blank input becomes 0. Only plain decimal text ("34", "36.5", "4e1") is
    converted; anything else, including "nan", "inf" and "1_000", is passed
    through untouched so the server can decide whether to accept it.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return 0
    text = str(value).strip()
    if not text:
        return 0
    if not _NUMBER_RE.match(text):
        return value
    if _INTEGER_RE.match(text):
        return int(text)
    number = float(text)
    if not math.isfinite(number):
        return value
    return number


class Record(BaseModel):
    """A patient visit record as held by the client (form buffer or table row)."""

    model_config = ConfigDict(frozen=True)

    record_id: str = ""
    patient_name: str = ""
    age: Union[int, float, str] = ""
    gender: str = ""
    contact_number: str = ""
    doctor_name: str = ""
    diagnosis: str = ""
    visit_date: str = ""

    @field_validator("record_id", mode="before")
    @classmethod
    def id_as_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    @property
    def is_new(self) -> bool:
        return not self.record_id

    @classmethod
    def from_remote(cls, payload: Dict[str, Any]) -> "Record":
        """Map a remote record into the local shape.

        Missing, null or empty remote fields become "" so the UI never sees None.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a record object, got {type(payload).__name__}")
        values = {}
        for local, remote in FIELD_MAP.items():
            raw = payload.get(remote)
            if raw in (None, "", 0, False):
                values[local] = ""
            elif local == "age" and isinstance(raw, (int, float)):
                values[local] = raw
            else:
                values[local] = str(raw)
        return cls(**values)

    def to_payload(self) -> Dict[str, Any]:
        """Outbound body in the remote schema. The id travels in the URL, not the body."""
        payload = {}
        for local, remote in FIELD_MAP.items():
            if local == "record_id":
                continue
            payload[remote] = getattr(self, local)
        payload["age"] = coerce_age(self.age)
        return payload

    def with_field(self, name: str, value: Any) -> "Record":
        if name not in FIELD_MAP:
            raise KeyError(name)
        return self.model_copy(update={name: value})


EMPTY_RECORD = Record()
