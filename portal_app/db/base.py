from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
import streamlit as st
from config import (
    SQLALCHEMY_URL, DB_POOL_SIZE, DB_MAX_OVERFLOW, DB_STATEMENT_TIMEOUT_MS, DB_APPLICATION_NAME
)


Base = declarative_base()

@st.cache_resource
def get_engine():
    """Process-wide singleton engine (lazy)"""
    return create_engine(
        SQLALCHEMY_URL,
        echo=False,
        future=True,
        pool_pre_ping=True,
        pool_recycle=1800,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        connect_args={
            "application_name": DB_APPLICATION_NAME,
            "options": f"-c statement_timeout={DB_STATEMENT_TIMEOUT_MS}",
        },
    )

@st.cache_resource
def get_session_factory():
    """Process-wide singleton session factory (lazy). Objects stay loaded after commit."""
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, future=True, expire_on_commit=False)
