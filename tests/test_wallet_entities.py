import json
from datetime import datetime

from walletpay.wallet.entities import Base, Wallet, WalletRechargeRequest


def test_wallet_table_name():
    wallet = Wallet(name="savings")
    assert wallet.__tablename__ == "wallets"
    assert Base.metadata.tables["wallets"] is Wallet.__table__
    assert wallet.to_dict()["name"] == "savings"


def test_wallet_defaults():
    wallet = Wallet()
    assert (wallet.id, wallet.name, wallet.balance, wallet.user_id) == (None, "", 0.0, 0)


def test_wallet_to_dict():
    stamp = datetime(2024, 1, 2, 3, 4, 5)
    wallet = Wallet(id=2, name="main", balance=10.25, user_id=5, created_at=stamp, updated_at=stamp)
    assert wallet.to_dict() == {
        "id": 2,
        "name": "main",
        "balance": 10.25,
        "user_id": 5,
        "created_at": stamp.isoformat(),
        "updated_at": stamp.isoformat(),
    }


def test_recharge_request_to_json_is_compact():
    assert WalletRechargeRequest(3, 50.5).to_json() == '{"wallet_id":3,"amount":50.5}'


def test_recharge_request_json_round_trip():
    request = WalletRechargeRequest(wallet_id=11, amount=99.99)
    decoded = json.loads(request.to_json())
    assert WalletRechargeRequest(**decoded) == request