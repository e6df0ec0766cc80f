# agenda/contato.py
"""Validation and persistence workflow for contacts.

A ``Contato`` wraps a single register or edit attempt: it keeps the submitted
payload, the error messages collected while validating it and the stored
record (``None`` when validation failed or nothing was written).

Lookups that need no payload are plain functions taking the session.
"""
import logging
import re
from typing import Any, List, Mapping, Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session

from . import crud, models
from .schemas import ContactFields

logger = logging.getLogger(__name__)

INVALID_EMAIL = "invalid email."
INVALID_PHONE = "invalid phone number."
NAME_REQUIRED = "name is a required field."
CONTACT_REQUIRED = "you must fill in at least one contact method."

PHONE_PATTERN = re.compile(r"[\d\s+\-()]{7,15}", re.ASCII)

FIELDS = tuple(ContactFields.model_fields)


def sanitize(payload: Optional[Mapping[str, Any]]) -> ContactFields:
    """Keep the known fields and turn anything that is not text into ''."""
    payload = payload or {}
    clean = {}
    for key in FIELDS:
        value = payload.get(key)
        clean[key] = value if isinstance(value, str) else ""
    return ContactFields(**clean)


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(phone: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone) is not None


def is_valid_id(contact_id: Any) -> bool:
    return isinstance(contact_id, str)


def validate(fields: ContactFields) -> List[str]:
    """Run every check and return all the messages, in a fixed order."""
    errors = []
    if fields.email and not is_valid_email(fields.email):
        errors.append(INVALID_EMAIL)
    if fields.phone and not is_valid_phone(fields.phone):
        errors.append(INVALID_PHONE)
    if not fields.name:
        errors.append(NAME_REQUIRED)
    if not fields.email and not fields.phone:
        errors.append(CONTACT_REQUIRED)
    return errors


class Contato:
    def __init__(self, db: Session, payload: Optional[Mapping[str, Any]]):
        self.db = db
        self.payload = payload
        self.fields: Optional[ContactFields] = None
        self.errors: List[str] = []
        self.record: Optional[models.Contact] = None

    def register(self) -> "Contato":
        self.validate()
        if self.errors:
            return self
        self.record = crud.create_contact(self.db, self.fields)
        logger.info("Contact %s registered", self.record.id)
        return self

    def edit(self, contact_id: Any) -> "Contato":
        if not is_valid_id(contact_id):
            logger.debug("Ignoring edit with malformed id %r", contact_id)
            return self
        self.validate()
        if self.errors:
            return self
        self.record = crud.update_contact(self.db, contact_id, self.fields)
        if self.record is None:
            logger.info("Contact %s not found for edit", contact_id)
        else:
            logger.info("Contact %s updated", contact_id)
        return self

    def validate(self) -> None:
        self.fields = sanitize(self.payload)
        self.errors = validate(self.fields)
        if self.errors:
            logger.info("Contact rejected: %s", "; ".join(self.errors))


def find_by_id(db: Session, contact_id: Any) -> Optional[models.Contact]:
    if not is_valid_id(contact_id):
        logger.debug("Ignoring lookup with malformed id %r", contact_id)
        return None
    return crud.get_contact(db, contact_id)


def find_all(db: Session) -> List[models.Contact]:
    return crud.get_contacts(db)


def delete_by_id(db: Session, contact_id: Any) -> Optional[models.Contact]:
    if not is_valid_id(contact_id):
        logger.debug("Ignoring delete with malformed id %r", contact_id)
        return None
    record = crud.delete_contact(db, contact_id)
    if record is not None:
        logger.info("Contact %s deleted", contact_id)
    return record
