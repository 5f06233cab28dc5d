# clients_service.py
from sqlalchemy.orm import Session
from leadboard.models.clients import Client
from leadboard.services.errors import ValidationError


def find_client(db: Session, name: str, company: str) -> Client | None:
    return (
        db.query(Client)
        .filter(Client.name == (name or "").strip())
        .filter(Client.company == (company or "").strip())
        .one_or_none()
    )


def create_client(db: Session, name: str, company: str) -> Client:
    name = (name or "").strip()
    company = (company or "").strip()
    if not name or not company:
        raise ValidationError("Client name and company are required")
    client = Client(name=name, company=company)
    db.add(client)
    db.flush()
    return client


def find_or_create_client(db: Session, name: str, company: str) -> Client:
    # Caller owns the transaction; a new client is only flushed here.
    existing = find_client(db, name, company)
    if existing is not None:
        return existing
    return create_client(db, name, company)


def list_clients(db: Session) -> list[Client]:
    return db.query(Client).order_by(Client.company.asc(), Client.name.asc()).all()
