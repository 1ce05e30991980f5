"""
Account Entity

A registered identity: normalized email plus password hash, with an
optional pending password reset.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import CheckConstraint, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


def normalize_email(email: str) -> str:
    return email.strip().lower()


class Account(SQLModel, table=True):
    """
    Account entity - the credential store record.

    Business Rules:
    - Email is stored normalized (trimmed, lower-cased) and is unique
    - Password stored as bcrypt hash, replaced on change
    - reset_token_hash and reset_token_expires_at are set together and
      cleared together (also enforced by a CHECK constraint)
    - A new reset request overwrites any pending one
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Pending password reset (SHA-256 hex digest of the raw token)
    reset_token_hash: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        CheckConstraint(
            "(reset_token_hash IS NULL) = (reset_token_expires_at IS NULL)",
            name="ck_accounts_reset_token_pair",
        ),
        Index("idx_accounts_reset_token_expires_at", "reset_token_expires_at"),
    )

    def set_reset_token(self, token_hash: str, expires_at: datetime) -> None:
        self.reset_token_hash = token_hash
        self.reset_token_expires_at = expires_at
        self.updated_at = utcnow()

    def clear_reset_token(self) -> None:
        self.reset_token_hash = None
        self.reset_token_expires_at = None
        self.updated_at = utcnow()

    @property
    def has_pending_reset(self) -> bool:
        return self.reset_token_hash is not None
