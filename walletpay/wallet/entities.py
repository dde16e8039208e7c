"""Wallet records and recharge requests."""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer, Numeric, String, func
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import DeclarativeBase, Mapped, MappedAsDataclass, mapped_column

_UNSIGNED_BIGINT = BigInteger().with_variant(mysql.BIGINT(unsigned=True), "mysql")
_ID = _UNSIGNED_BIGINT.with_variant(Integer, "sqlite")


class Base(MappedAsDataclass, DeclarativeBase):
    """Declarative base for the wallet tables."""


class Wallet(Base):
    """A user's wallet and its balance."""

    __tablename__ = "wallets"

    id: Mapped[Optional[int]] = mapped_column(
        _ID, primary_key=True, autoincrement=True, default=None
    )
    name: Mapped[str] = mapped_column(String(255), default="")
    balance: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0.0)
    user_id: Mapped[int] = mapped_column(_UNSIGNED_BIGINT, default=0)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=func.now(), default=None
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=func.now(), default=None
    )

    def to_dict(self):
        """Return the JSON representation of the wallet."""
        return {
            "id": self.id,
            "name": self.name,
            "balance": self.balance,
            "user_id": self.user_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass
class WalletRechargeRequest:
    """A request to add an amount to a wallet."""

    wallet_id: int = 0
    amount: float = 0.0

    def to_json(self):
        """Encode the request as compact JSON."""
        return json.dumps(
            {"wallet_id": self.wallet_id, "amount": self.amount}, separators=(",", ":")
        )