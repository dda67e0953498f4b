"""
social_service package

This package contains the backend logic for the social networking service.
It includes:

- FastAPI application factory (`main.py`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Password hashing and JWT logic (`auth.py`)
- Account, social graph and messaging services (`services/`)
- Pydantic schemas (`schemas.py`)
"""
