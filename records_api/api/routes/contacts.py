"""Contact Routes — contact-form submissions and their triage status.

Invariants:
    - POST requires name, email, subject, message; any missing → 400, nothing stored
    - New contacts always start with status=new; client-sent status/createdAt ignored
    - PUT changes status only
    - GET by id of an absent record → 404 "Contact not found"
"""

import logging

from fastapi import APIRouter, Depends, status

from records_api.core.domain_types import ContactStatus
from records_api.core.errors import ResourceNotFoundError, ValidationError
from records_api.infrastructure.record_store import RecordStore, get_record_store
from records_api.models.contact import ContactMessage
from records_api.schemas.contact import (
    ContactCreate, ContactResponse, ContactStatusUpdate, ContactSubmitted,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/contacts", tags=["contacts"])

REQUIRED_FIELDS_MESSAGE = "All fields are required"


@router.post(
    "", response_model=ContactSubmitted,
    status_code=status.HTTP_201_CREATED,
)
async def submit_contact(
    body: ContactCreate | None = None,
    store: RecordStore = Depends(get_record_store),
):
    """Store a contact-form submission. A missing body counts as missing fields."""
    body = body or ContactCreate()
    missing = body.missing_fields()
    if missing:
        logger.info(f"Contact submission missing fields: {', '.join(missing)}")
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    contact = await store.insert(ContactMessage(
        name=body.name,
        email=body.email,
        subject=body.subject,
        message=body.message,
        status=ContactStatus.NEW.value,
    ))
    return ContactSubmitted(contact=ContactResponse.model_validate(contact))


@router.get("", response_model=list[ContactResponse])
async def list_contacts(store: RecordStore = Depends(get_record_store)):
    """All contacts, newest first."""
    contacts = await store.list(ContactMessage)
    return [ContactResponse.model_validate(c) for c in contacts]


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: str, store: RecordStore = Depends(get_record_store),
):
    contact = await store.get(ContactMessage, contact_id)
    if contact is None:
        raise ResourceNotFoundError("Contact", contact_id)
    return ContactResponse.model_validate(contact)


@router.put("/{contact_id}", response_model=ContactResponse)
async def update_contact_status(
    contact_id: str,
    body: ContactStatusUpdate,
    store: RecordStore = Depends(get_record_store),
):
    """Change a contact's status. An omitted status leaves the record unchanged."""
    changes = {}
    if body.status is not None:
        changes["status"] = body.status.value
    contact = await store.update(ContactMessage, contact_id, changes)
    if contact is None:
        raise ResourceNotFoundError("Contact", contact_id)
    return ContactResponse.model_validate(contact)
