"""Creation and settlement of recharge transactions."""

import uuid

from walletpay.payment.entities import Transaction

PENDING = "pending"


class TransactionNotFoundError(LookupError):
    """No transaction carries the requested reference number."""


class TransactionCompletedError(ValueError):
    """The transaction has already left the pending state."""


class TransactionService:
    """Business rules for wallet recharge transactions."""

    def __init__(self, repository):
        self.repository = repository

    def create_recharge_transaction(self, request):
        """Store a pending transaction for a recharge request and return its id."""
        transaction = Transaction(
            wallet_id=request.wallet_id,
            amount=request.amount,
            status=PENDING,
            ref_number=str(uuid.uuid4()),
        )
        return self.repository.save(transaction)

    def update_transaction(self, request):
        """Set the status of a pending transaction found by its reference number."""
        transaction = self.repository.get_by_ref_number(request.ref_number)
        if transaction is None or not transaction.id:
            raise TransactionNotFoundError("transaction not found")
        if transaction.status != PENDING:
            raise TransactionCompletedError("transaction already completed")
        transaction.status = request.status
        self.repository.update(transaction)