# clients.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from leadboard.database import get_db
from leadboard.schemas.clients import ClientRead
from leadboard.services.clients_service import list_clients


router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=list[ClientRead])
def read_clients(db: Session = Depends(get_db)) -> list[ClientRead]:
    return [ClientRead.model_validate(client) for client in list_clients(db)]
