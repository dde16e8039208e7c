"""Payment records and the requests that act on them."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer, Numeric, String, func
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import DeclarativeBase, Mapped, MappedAsDataclass, mapped_column

_UNSIGNED_BIGINT = BigInteger().with_variant(mysql.BIGINT(unsigned=True), "mysql")
_ID = _UNSIGNED_BIGINT.with_variant(Integer, "sqlite")


class Base(MappedAsDataclass, DeclarativeBase):
    """Declarative base for the payment tables."""


class Transaction(Base):
    """A wallet recharge transaction."""

    __tablename__ = "transactions"

    id: Mapped[Optional[int]] = mapped_column(
        _ID, primary_key=True, autoincrement=True, default=None
    )
    ref_number: Mapped[str] = mapped_column(String(255), default="")
    amount: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0.0)
    # One of PENDING, COMPLETED or FAILED.
    status: Mapped[str] = mapped_column(String(16), default="")
    wallet_id: Mapped[int] = mapped_column(_UNSIGNED_BIGINT, default=0)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=func.now(), default=None
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=func.now(), default=None
    )

    def to_dict(self):
        """Return the JSON representation of the transaction."""
        return {
            "id": self.id,
            "ref_number": self.ref_number,
            "amount": self.amount,
            "status": self.status,
            "wallet_id": self.wallet_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass
class TransactionUpdateRequest:
    """A request to change the status of a transaction."""

    ref_number: str = ""
    status: str = ""


@dataclass
class WalletRechargeRequest:
    """A request to add an amount to a wallet."""

    wallet_id: int = 0
    amount: float = 0.0