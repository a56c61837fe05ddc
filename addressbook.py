import logging
from threading import Lock
from typing import List

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

CONTACT_PATH = "/contacts/person/{contact_id}"


class ContactIn(BaseModel):
    name: str = ""


class Contact(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str

    def href(self, base_url: str) -> str:
        return base_url.rstrip("/") + CONTACT_PATH.format(contact_id=self.id)


class ContactRecord(BaseModel):
    id: int
    name: str
    href: str


class ContactNotFound(LookupError):
    def __init__(self, contact_id: int):
        super().__init__(f"Contact {contact_id} not found")
        self.contact_id = contact_id


class AddressBook:
    """In-memory, thread-safe collection of contacts.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice even after the contact holding it is deleted.
    Contacts are immutable; ``list`` returns a copy of the sequence.
    """

    def __init__(self):
        self._contacts: List[Contact] = []
        self._next_id = 1
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)

    def list(self) -> List[Contact]:
        with self._lock:
            return list(self._contacts)

    def next_identifier(self) -> int:
        with self._lock:
            return self._next_id

    def create(self, candidate: ContactIn) -> Contact:
        with self._lock:
            contact = Contact(id=self._next_id, name=candidate.name)
            self._next_id += 1
            self._contacts.append(contact)
        logger.info("Created contact %s", contact.id)
        return contact

    def add(self, contact: Contact) -> Contact:
        """Store a contact whose id was assigned out-of-band (seeding)."""
        with self._lock:
            if self._index(contact.id) is not None:
                raise ValueError(f"Contact {contact.id} already exists")
            self._contacts.append(contact)
            self._next_id = max(self._next_id, contact.id + 1)
        logger.info("Added contact %s", contact.id)
        return contact

    def find(self, contact_id: int) -> Contact:
        with self._lock:
            i = self._index(contact_id)
            if i is not None:
                return self._contacts[i]
        logger.debug("Contact %s not found", contact_id)
        raise ContactNotFound(contact_id)

    def update(self, contact_id: int, name: str) -> Contact:
        with self._lock:
            i = self._index(contact_id)
            if i is not None:
                contact = self._contacts[i].model_copy(update={"name": name})
                self._contacts[i] = contact
                logger.info("Updated contact %s", contact_id)
                return contact
        logger.debug("Contact %s not found", contact_id)
        raise ContactNotFound(contact_id)

    def delete(self, contact_id: int) -> None:
        with self._lock:
            i = self._index(contact_id)
            if i is not None:
                del self._contacts[i]
                logger.info("Deleted contact %s", contact_id)
                return
        logger.debug("Contact %s not found", contact_id)
        raise ContactNotFound(contact_id)

    def clear(self) -> None:
        with self._lock:
            self._contacts.clear()
            self._next_id = 1
        logger.info("Address book cleared")

    # Caller must hold the lock.
    def _index(self, contact_id: int):
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                return i
        return None
