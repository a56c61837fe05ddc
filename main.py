from typing import List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response, status

from addressbook import AddressBook, Contact, ContactIn, ContactNotFound, ContactRecord
from config import Settings, get_settings, setup_logging

router = APIRouter()


def get_address_book(request: Request) -> AddressBook:
    return request.app.state.address_book


def get_base_url(request: Request) -> str:
    return request.app.state.settings.base_url or str(request.base_url)


def render(contact: Contact, base_url: str) -> ContactRecord:
    return ContactRecord(id=contact.id, name=contact.name, href=contact.href(base_url))


@router.get("/contacts", response_model=List[ContactRecord])
def read_contacts(
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
):
    return [render(contact, base_url) for contact in book.list()]


@router.post("/contacts", response_model=ContactRecord, status_code=status.HTTP_201_CREATED)
def create_contact(
    contact: ContactIn,
    response: Response,
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
):
    record = render(book.create(contact), base_url)
    response.headers["Location"] = record.href
    return record


@router.get("/contacts/person/{contact_id}", response_model=ContactRecord)
def read_contact(
    contact_id: int,
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
):
    try:
        return render(book.find(contact_id), base_url)
    except ContactNotFound:
        raise HTTPException(status_code=404, detail="Contact not found")


@router.put("/contacts/person/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_contact(
    contact_id: int,
    updated_contact: ContactIn,
    book: AddressBook = Depends(get_address_book),
):
    try:
        book.update(contact_id, updated_contact.name)
    except ContactNotFound:
        raise HTTPException(status_code=404, detail="Contact not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/contacts/person/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(contact_id: int, book: AddressBook = Depends(get_address_book)):
    try:
        book.delete(contact_id)
    except ContactNotFound:
        raise HTTPException(status_code=404, detail="Contact not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def create_app(settings: Optional[Settings] = None, address_book: Optional[AddressBook] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.address_book = address_book if address_book is not None else AddressBook()
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
