# agenda/crud.py
from sqlalchemy.orm import Session

from . import models, schemas

def create_contact(db: Session, fields: schemas.ContactFields):
    """Insert a new contact and return the stored row."""
    db_contact = models.Contact(**fields.model_dump())
    db.add(db_contact)
    db.commit()
    db.refresh(db_contact)
    return db_contact

def get_contact(db: Session, contact_id: str):
    """Look up one contact by id."""
    return db.get(models.Contact, contact_id)

def get_contacts(db: Session):
    """All contacts, most recently created first."""
    return db.query(models.Contact).order_by(models.Contact.created_at.desc()).all()

def update_contact(db: Session, contact_id: str, fields: schemas.ContactFields):
    """Replace the business fields of a contact. Returns None when the id is unknown."""
    db_contact = db.get(models.Contact, contact_id)
    if db_contact:
        for key, value in fields.model_dump().items():
            setattr(db_contact, key, value)
        db.commit()
        db.refresh(db_contact)
    return db_contact

def delete_contact(db: Session, contact_id: str):
    """Delete a contact and return the removed row, or None."""
    db_contact = db.get(models.Contact, contact_id)
    if db_contact:
        db.delete(db_contact)
        db.commit()
    return db_contact
