# agenda/main.py
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List

import dotenv
import uvicorn
from fastapi import Body, Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import contato, models, schemas
from .database import engine, get_db

dotenv.load_dotenv()

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # No migrations: create missing tables on startup
    models.Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="agenda", lifespan=lifespan)

# --- CORS ---
origins = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost,http://localhost:5173").split(",")
    if origin.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def validation_failed(errors: List[str]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=schemas.ValidationErrors(errors=errors).model_dump(),
    )


# ==========================================================================
# Home
# ==========================================================================

@app.get("/", response_model=List[schemas.Contact])
def index(db: Session = Depends(get_db)):
    """Home page data: every contact, newest first"""
    return contato.find_all(db)

# ==========================================================================
# Login (not implemented)
# ==========================================================================

@app.get("/login/index")
def login_index():
    """Login page stub"""
    return {"status": "not implemented"}

@app.post("/login/register")
def login_register():
    """Account registration stub"""
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Registration is not implemented")

@app.post("/login/login")
def login_login():
    """Login stub"""
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Login is not implemented")

# ==========================================================================
# Contacts
# ==========================================================================

@app.get("/api/contacts/", response_model=List[schemas.Contact])
def read_contacts(db: Session = Depends(get_db)):
    """Every contact, newest first"""
    return contato.find_all(db)

@app.post(
    "/api/contacts/",
    response_model=schemas.Contact,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": schemas.ValidationErrors}},
)
def register_contact(payload: dict = Body(...), db: Session = Depends(get_db)):
    """Validate and store a new contact"""
    result = contato.Contato(db, payload).register()
    if result.errors:
        return validation_failed(result.errors)
    return result.record

@app.get("/api/contacts/{contact_id}", response_model=schemas.Contact)
def read_contact(contact_id: str, db: Session = Depends(get_db)):
    """One contact by id"""
    db_contact = contato.find_by_id(db, contact_id)
    if db_contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return db_contact

@app.put(
    "/api/contacts/{contact_id}",
    response_model=schemas.Contact,
    responses={422: {"model": schemas.ValidationErrors}},
)
def edit_contact(contact_id: str, payload: dict = Body(...), db: Session = Depends(get_db)):
    """Validate and replace the fields of an existing contact"""
    result = contato.Contato(db, payload).edit(contact_id)
    if result.errors:
        return validation_failed(result.errors)
    if result.record is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return result.record

@app.delete("/api/contacts/{contact_id}", response_model=schemas.Contact)
def delete_contact(contact_id: str, db: Session = Depends(get_db)):
    """Delete a contact and return it"""
    db_contact = contato.delete_by_id(db, contact_id)
    if db_contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return db_contact

@app.get("/api/health")
def health_check():
    """Health check"""
    return {"status": "healthy", "version": "1.0", "timestamp": datetime.now(timezone.utc).isoformat()}


if __name__ == "__main__":
    logger.info("Serving on http://localhost:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)
