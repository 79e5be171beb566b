# create_tables.py
"""
Create the database schema and a default admin account.

    python create_tables.py

The admin credentials come from ADMIN_EMAIL / ADMIN_PASSWORD (defaults below).
"""
import logging
import os

from taskboard.database import Base, SessionLocal, engine
from taskboard.models import User
from taskboard.config.settings import settings
from taskboard.utils.security import get_password_hash

logger = logging.getLogger("create_tables")

def create_tables():
    """Create all tables that do not exist yet"""
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created")

def create_default_admin():
    """Create a default admin user unless one with the same email exists"""
    email = os.getenv("ADMIN_EMAIL", "admin@example.com")
    password = os.getenv("ADMIN_PASSWORD", "admin123")

    db = SessionLocal()
    try:
        if db.query(User).filter(User.email == email).first():
            logger.info(f"Admin user {email} already exists")
            return

        db.add(User(
            name="Admin User",
            email=email,
            hashed_password=get_password_hash(password),
            role=settings.ADMIN_ROLE,
            department="Management",
        ))
        db.commit()
        logger.info(f"Admin user {email} created")
    finally:
        db.close()

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    create_tables()
    create_default_admin()
