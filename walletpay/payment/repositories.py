"""Storage of payment transactions."""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import sessionmaker

from walletpay.payment.entities import Base, Transaction


class TransactionRepository:
    """Transactions kept in a SQL database."""

    def __init__(self, engine):
        Base.metadata.create_all(engine)
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def save(self, transaction):
        """Insert a transaction, stamping both timestamps, and return its id."""
        now = datetime.now()
        transaction.created_at = now
        transaction.updated_at = now
        with self._sessions.begin() as session:
            session.add(transaction)
            session.flush()
            return transaction.id

    def update(self, transaction):
        """Write every field of a transaction, inserting it if it is not stored yet."""
        transaction.updated_at = datetime.now()
        with self._sessions.begin() as session:
            merged = session.merge(transaction)
            session.flush()
            if transaction.id is None:
                transaction.id = merged.id

    def delete(self, transaction):
        """Remove a transaction by its primary key."""
        if not transaction.id:
            raise ValueError("cannot delete a transaction without a primary key")
        with self._sessions.begin() as session:
            session.execute(delete(Transaction).where(Transaction.id == transaction.id))

    def get_by_ref_number(self, ref_number):
        """Return the first transaction with this reference number, or None."""
        with self._sessions() as session:
            query = (
                select(Transaction)
                .where(Transaction.ref_number == ref_number)
                .order_by(Transaction.id)
                .limit(1)
            )
            return session.scalars(query).first()