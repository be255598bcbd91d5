from __future__ import annotations

import csv
import io
import json
import xml.etree.ElementTree as ET
from datetime import datetime

import pytest

from src.user_management.user_management.core.enums import Role
from src.user_management.user_management.core.exceptions import UnsupportedExportFormatError
from src.user_management.user_management.export.factory import ExportFormatterFactory
from src.user_management.user_management.export.formatters.base import EXPORT_FIELDS
from src.user_management.user_management.export.formatters.csv_formatter import CsvExportFormatter
from src.user_management.user_management.export.formatters.json_formatter import JsonExportFormatter
from src.user_management.user_management.export.formatters.xml_formatter import XmlExportFormatter
from src.user_management.user_management.export.service import UserExportService
from src.user_management.user_management.users.memory_user_repository import InMemoryUserRepository
from src.user_management.user_management.users.model import User

CREATED = datetime(2026, 1, 1, 9, 0)

USERS = [
    User(user_id=1, name="Alice Johnson", email="alice@example.com", role=Role.USER, phone="+1",
         department="Engineering", created_at=CREATED, updated_at=CREATED),
    User(user_id=2, name="Charlie, Brown", email="charlie@example.com", role=Role.ADMIN),
    User(user_id=3, name=None, email=None, role=None, department=None, active=None),
]


def test_json_parses_back_to_same_ids_emails_roles():
    rows = json.loads(JsonExportFormatter().render(USERS))

    assert [r["id"] for r in rows] == [1, 2, 3]
    assert [r["email"] for r in rows] == ["alice@example.com", "charlie@example.com", ""]
    assert [r["role"] for r in rows] == ["USER", "ADMIN", ""]
    assert list(rows[0].keys()) == list(EXPORT_FIELDS)
    assert rows[0]["created_at"] == "2026-01-01T09:00:00"


def test_nulls_render_as_empty_text_and_false():
    row = json.loads(JsonExportFormatter().render(USERS))[2]
    assert row["name"] == "" and row["department"] == ""
    assert row["active"] is False


def test_csv_has_header_and_one_row_per_user():
    text = CsvExportFormatter().render(USERS)
    rows = list(csv.DictReader(io.StringIO(text)))

    assert text.splitlines()[0] == ",".join(EXPORT_FIELDS)
    assert len(rows) == 3
    assert rows[1]["name"] == "Charlie, Brown"
    assert rows[0]["active"] == "true"
    assert rows[2]["active"] == "false"
    assert rows[2]["email"] == ""


def test_xml_has_one_element_per_user():
    text = XmlExportFormatter().render(USERS)
    root = ET.fromstring(text.split("\n", 1)[1])

    users = root.findall("user")
    assert root.tag == "users"
    assert [u.findtext("email") for u in users] == ["alice@example.com", "charlie@example.com", ""]
    assert users[2].findtext("active") == "false"
    assert [child.tag for child in users[0]] == list(EXPORT_FIELDS)


def test_xml_drops_characters_xml_cannot_carry():
    user = User(user_id=1, name="Bo\x01b", email="bob@example.com", role=Role.USER, department="R\x0bD\tLab")

    root = ET.fromstring(XmlExportFormatter().render([user]).split("\n", 1)[1])

    assert root.find("user").findtext("name") == "Bob"
    assert root.find("user").findtext("department") == "RD\tLab"


@pytest.mark.parametrize("formatter", [JsonExportFormatter(), CsvExportFormatter(), XmlExportFormatter()])
def test_output_is_deterministic(formatter):
    assert formatter.render(USERS) == formatter.render(list(USERS))


@pytest.mark.parametrize("token,cls", [("json", JsonExportFormatter), ("CSV", CsvExportFormatter), (" Xml ", XmlExportFormatter)])
def test_factory_accepts_tokens_case_insensitively(token, cls):
    assert isinstance(ExportFormatterFactory().for_format(token), cls)


@pytest.mark.parametrize("token", ["pdf", "", None, "xlsx"])
def test_factory_rejects_unknown_formats(token):
    with pytest.raises(UnsupportedExportFormatError):
        ExportFormatterFactory().for_format(token)


def test_export_service_builds_document():
    repo = InMemoryUserRepository()
    repo.save(User(user_id=None, name="Alice Johnson", email="alice@example.com", role=Role.USER))
    svc = UserExportService(repo, clock=lambda: datetime(2026, 3, 4, 5, 6, 7))

    doc = svc.export("csv")

    assert doc.media_type == "text/csv"
    assert doc.filename == "users_20260304_050607.csv"
    assert "alice@example.com" in doc.content
