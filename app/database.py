import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv

load_dotenv()

Base = declarative_base()


def get_database_url() -> str:
    """Get database URL from environment."""
    url = os.getenv("DATABASE_URL", "sqlite:///./sales_crm.db")
    # Ensure psycopg (v3) driver is used
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    elif url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg://", 1)
    return url


DATABASE_URL = get_database_url()


def get_engine(url: str = DATABASE_URL):
    """Create the database engine."""
    connect_args = {}
    if url.startswith("sqlite"):
        # Sessions are used outside the thread that opened the connection
        connect_args["check_same_thread"] = False
    return create_engine(
        url,
        echo=os.getenv("DEBUG", "false").lower() == "true",
        connect_args=connect_args,
    )


engine = get_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency for FastAPI routes to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create all tables. Raises RuntimeError when the database is unreachable."""
    # Register models on Base.metadata
    import app.models  # noqa: F401

    try:
        Base.metadata.create_all(bind=bind or engine)
    except Exception as e:
        raise RuntimeError(f"Could not initialize database: {e}") from e
