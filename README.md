# walletpay

Building blocks for a wallet service and a payment service: database and
Redis configuration from the environment, SQL-backed storage of recharge
transactions, the rules for creating and settling those transactions, wallet
records, and Flask request hooks for logging.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Configuration (`walletpay.config`)

Settings are read from the environment; a `.env` file in the working
directory is loaded when the module is imported.

| Variable | Meaning |
| --- | --- |
| `DB_CONNECTION`, `DB_HOST`, `DB_PORT`, `DB_DATABASE`, `DB_USERNAME`, `DB_PASSWORD` | Main MySQL database |
| `DB_CONNECTION_SY`, `DB_HOST_SY`, `DB_PORT_SY`, `DB_DATABASE_SY`, `DB_USERNAME_SY`, `DB_PASSWORD_SY` | Secondary MySQL database |
| `REDIS_HOST` | Redis address as `host:port` |

- `connect_db()` returns a SQLAlchemy engine. When `DB_CONNECTION` is empty it
  opens the SQLite file `./../../test.db`; otherwise it builds a MySQL engine
  once and returns the same engine on later calls.
- `connect_db_sy()` does the same with the `*_SY` variables and the SQLite
  file `./../../testSy.db`, printing the working directory when it falls back
  to SQLite.
- Both print `Error connecting to DB` and re-raise the SQLAlchemy error when
  the database cannot be reached.
- `mysql_url(username, password, host, port, database)` builds the
  `mysql+pymysql://` URL they use. The `pymysql` driver is not installed with
  this package; install it yourself to connect to MySQL.
- `connect_redis()` returns a `redis.Redis` client for `REDIS_HOST`, with
  host `localhost` and port `6379` where they are not given.

## Payment transactions

`walletpay.payment.entities` defines the `transactions` table as the
`Transaction` model (`id`, `ref_number`, `amount`, `status`, `wallet_id`,
`created_at`, `updated_at`, and `to_dict()` for JSON), plus the plain
`TransactionUpdateRequest(ref_number, status)` and
`WalletRechargeRequest(wallet_id, amount)`.

`walletpay.payment.repositories.TransactionRepository(engine)` creates the
table if needed and offers:

- `save(transaction)` – stamps both timestamps, inserts, returns the new id;
- `update(transaction)` – writes every field, stamping `updated_at`;
- `delete(transaction)` – removes by primary key, `ValueError` without one;
- `get_by_ref_number(ref_number)` – the first match, or `None`.

`walletpay.payment.services.TransactionService(repository)`:

- `create_recharge_transaction(request)` stores a `pending` transaction with
  a fresh UUID reference number and returns its id;
- `update_transaction(request)` sets the new status of a pending transaction,
  raising `TransactionNotFoundError` for an unknown reference number and
  `TransactionCompletedError` when the transaction is no longer pending.

```python
from sqlalchemy import create_engine

from walletpay.payment.entities import TransactionUpdateRequest, WalletRechargeRequest
from walletpay.payment.repositories import TransactionRepository
from walletpay.payment.services import TransactionService

repository = TransactionRepository(create_engine("sqlite://"))
service = TransactionService(repository)

transaction_id = service.create_recharge_transaction(WalletRechargeRequest(wallet_id=1, amount=50.0))
ref_number = repository.get_by_ref_number  # look the transaction up by its reference number
```

## Wallet records

`walletpay.wallet.entities` defines the `wallets` table as the `Wallet` model
(`id`, `name`, `balance`, `user_id`, `created_at`, `updated_at`, and
`to_dict()`), and `WalletRechargeRequest(wallet_id, amount)` whose `to_json()`
gives compact JSON such as `{"wallet_id":1,"amount":50.0}`.

## Utilities and request hooks

- `walletpay.utils.date_now(format_date="")` gives today's date as
  `YYYY-MM-DD`, or in a given `strftime` format.
- `error_logger(error_desc)` and `info_logger(info_desc)` append a
  time-stamped line to `storage/logs/errors/err-<date>.log` and
  `storage/logs/informations/info-<date>.log`; the directories must exist.
- `walletpay.middlewares.db(app, conn)` makes `conn` available as
  `flask.g.db` in every request of a Flask app.
- `walletpay.middlewares.logger(app)` appends one line per request
  (client address, time, method, path, status, latency) to
  `storage/logs/<date>.log`.

## What this package does not do

It has no HTTP routes and no command that starts a server. It does not
publish or consume recharge requests on a message queue. It has no storage
class or service for wallets: only the `Wallet` model and its recharge
request are provided.