# contact.py
import logging
import re

logger = logging.getLogger(__name__)

FIELDS = ("name", "email", "message")

# shape check only: something@something.something, no second @
EMAIL_RE = re.compile(r"^[^@]+@[^@]+\.[^@]+$")


def _text(record, key):
    value = record.get(key)
    return "" if value is None else str(value)


def validate(record):
    errors = {}
    if not _text(record, "name").strip():
        errors["name"] = "Required"
    if not EMAIL_RE.fullmatch(_text(record, "email")):
        errors["email"] = "Invalid email"
    if not _text(record, "message").strip():
        errors["message"] = "Required"
    return errors


def log_delivery(record):
    """Default sender: there is no mail backend, so the message goes to the log."""
    logger.info("contact message from %s <%s> (%d chars)",
                record["name"], record["email"], len(record["message"]))


def submit(record, deliver):
    """Validate and, if clean, hand the record to `deliver`. Returns the error mapping."""
    errors = validate(record)
    if errors:
        logger.info("contact form rejected: %s", ", ".join(sorted(errors)))
        return errors
    deliver({key: _text(record, key) for key in FIELDS})
    return errors
