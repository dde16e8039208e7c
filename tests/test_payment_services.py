import uuid

import pytest
from sqlalchemy import create_engine

from walletpay.payment.entities import TransactionUpdateRequest, WalletRechargeRequest
from walletpay.payment.repositories import TransactionRepository
from walletpay.payment.services import (
    TransactionCompletedError,
    TransactionNotFoundError,
    TransactionService,
)


@pytest.fixture
def repository(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'payment.db'}")
    yield TransactionRepository(engine)
    engine.dispose()


@pytest.fixture
def service(repository):
    return TransactionService(repository)


def _stored(repository, transaction_id):
    with repository._sessions() as session:
        from walletpay.payment.entities import Transaction

        return session.get(Transaction, transaction_id)


def test_create_stores_pending_transaction(service, repository):
    transaction_id = service.create_recharge_transaction(
        WalletRechargeRequest(wallet_id=4, amount=12.5)
    )
    stored = _stored(repository, transaction_id)
    assert stored.status == "pending"
    assert stored.wallet_id == 4
    assert stored.amount == 12.5
    assert str(uuid.UUID(stored.ref_number)) == stored.ref_number


def test_create_gives_distinct_reference_numbers(service, repository):
    first = service.create_recharge_transaction(WalletRechargeRequest(wallet_id=1, amount=1.0))
    second = service.create_recharge_transaction(WalletRechargeRequest(wallet_id=1, amount=1.0))
    assert first != second
    assert _stored(repository, first).ref_number != _stored(repository, second).ref_number


def test_update_changes_status(service, repository):
    transaction_id = service.create_recharge_transaction(
        WalletRechargeRequest(wallet_id=2, amount=5.0)
    )
    ref = _stored(repository, transaction_id).ref_number
    service.update_transaction(TransactionUpdateRequest(ref_number=ref, status="COMPLETED"))
    assert repository.get_by_ref_number(ref).status == "COMPLETED"


def test_update_unknown_reference(service):
    with pytest.raises(TransactionNotFoundError, match="transaction not found"):
        service.update_transaction(TransactionUpdateRequest(ref_number="missing", status="FAILED"))


def test_update_twice_is_rejected(service, repository):
    transaction_id = service.create_recharge_transaction(
        WalletRechargeRequest(wallet_id=2, amount=5.0)
    )
    ref = _stored(repository, transaction_id).ref_number
    service.update_transaction(TransactionUpdateRequest(ref_number=ref, status="FAILED"))
    with pytest.raises(TransactionCompletedError, match="transaction already completed"):
        service.update_transaction(TransactionUpdateRequest(ref_number=ref, status="COMPLETED"))
    assert repository.get_by_ref_number(ref).status == "FAILED"