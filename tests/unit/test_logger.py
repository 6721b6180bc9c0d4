"""
Tests for rolescout.utils.logger: audit records and payload redaction.
"""

import pytest
from bson import ObjectId
from loguru import logger

from rolescout.utils.constants import AuditAction
from rolescout.utils.logger import REDACTED, audit_log, get_logger, is_audit_record, redact


@pytest.fixture
def audit_lines():
    """Collect what the audit sink would write."""
    lines: list[str] = []
    handler_id = logger.add(
        lines.append,
        format="{extra[audit_action]}|{extra[talent_id]}|{message}",
        filter=is_audit_record,
    )
    yield lines
    logger.remove(handler_id)


# ── redact ──────────────────────────────────────────────────────────────────


class TestRedact:
    def test_talent_attributes_masked(self):
        payload = {"gender": "Female", "ethnicity": "Asian", "date_of_birth": "1999-01-10", "score": 60}
        assert redact(payload) == {
            "gender": REDACTED,
            "ethnicity": REDACTED,
            "date_of_birth": REDACTED,
            "score": 60,
        }

    def test_credentials_masked_by_substring(self):
        payload = {"db_password": "hunter2", "API_KEY": "abc", "mongodb_uri": "mongodb://u:p@h"}
        assert set(redact(payload).values()) == {REDACTED}

    def test_nested_lists_and_dicts(self):
        payload = {"roles": [{"id": "r1", "score": 40, "talent": {"height": "175cm"}}]}
        assert redact(payload) == {"roles": [{"id": "r1", "score": 40, "talent": {"height": REDACTED}}]}

    def test_scalars_untouched(self):
        assert redact("plain") == "plain"
        assert redact(None) is None


# ── audit records ───────────────────────────────────────────────────────────


class TestAuditLog:
    def test_writes_action_and_talent(self, audit_lines):
        talent_id = ObjectId()
        audit_log(AuditAction.SUGGESTIONS_SKIPPED, talent_id, {"reason": "no_subscriptions"})

        assert len(audit_lines) == 1
        action, talent, message = audit_lines[0].split("|", 2)
        assert action == "suggestions_skipped"
        assert talent == str(talent_id)
        assert "no_subscriptions" in message

    def test_accepts_action_value(self, audit_lines):
        audit_log("roles_suggested", "t1", {"roles": []})
        assert audit_lines[0].startswith("roles_suggested|t1|")

    def test_details_are_redacted(self, audit_lines):
        audit_log(AuditAction.ROLES_SUGGESTED, "t1", {"gender": "Female", "roles": []})
        assert "Female" not in audit_lines[0]
        assert REDACTED in audit_lines[0]

    def test_unknown_action_rejected(self):
        with pytest.raises(ValueError):
            audit_log("role_deleted", "t1", {})

    def test_ordinary_records_not_audited(self, audit_lines):
        get_logger(__name__).info("collector fetched 3 projects")
        assert audit_lines == []


class TestIsAuditRecord:
    def test_bound_action(self):
        assert is_audit_record({"extra": {"audit_action": "roles_suggested"}})

    def test_foreign_action(self):
        assert not is_audit_record({"extra": {"audit_action": "login"}})

    def test_no_action(self):
        assert not is_audit_record({"extra": {"name": "rolescout.core"}})
