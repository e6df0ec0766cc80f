# agenda/database.py
import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

dotenv.load_dotenv()

# 1. Database URL (SQLite file in the working directory unless DATABASE_URL is set)
SQLALCHEMY_DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./contacts.db")

# 2. Engine
connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

# 3. Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 4. Base class for the ORM models
Base = declarative_base()

# DB session per request (Dependency)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
