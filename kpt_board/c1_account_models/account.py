"""Account database models for the KPT board backend."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from kpt_board.c1_database_session.base import Base
from kpt_board.c1_account_models.passwords import hash_password, verify_password


class Account(Base):
    """Account model: identity plus a one-way hashed credential."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    display_name = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    sessions = relationship("AccountSession", back_populates="account", cascade="all, delete-orphan")

    @classmethod
    def create(cls, password: str, display_name: str) -> "Account":
        """Build a new, not yet persisted account from a plaintext password."""
        return cls(
            display_name=display_name,
            hashed_password=hash_password(password),
            created_at=datetime.utcnow(),
        )

    def matches_password(self, password: str) -> bool:
        return verify_password(password, self.hashed_password)

    def __repr__(self) -> str:
        return f"<Account id={self.id} display_name={self.display_name!r}>"


class AccountSession(Base):
    """Issued bearer sessions. Only the token hash is stored."""

    __tablename__ = "account_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False)
    session_token_hash = Column(String(64), unique=True, nullable=False, index=True)
    started_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    expires_at = Column(DateTime, nullable=False)

    # Relationships
    account = relationship("Account", back_populates="sessions")

    __table_args__ = (
        Index("idx_account_sessions_account", "account_id"),
    )
