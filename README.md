# marketbooks

A small double-entry bookkeeping library. You record balanced journal entries
and post them to a ledger. From the ledger you can then produce a trial
balance, an income statement, a cash flow statement and a balance sheet. The
package also has simple models for accounts, wallets, assets, liabilities,
transactions and contracts.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Demo command

```
marketbooks
```

The command takes no options. It journals two transactions:

- 1000 debited to `ACC001` (Cash) and credited to `ACC003` (Revenue).
- 500 debited to `ACC004` (Expenses) and credited to `ACC001`.

It posts both to a ledger. It then prints a trial balance, an income statement
and a cash flow statement to standard output. The function behind the command
is `marketbooks.cli.main`. `marketbooks.cli.build_demo_ledger()` returns the
same ledger for your own use.

## Usage

```python
import sys

from marketbooks.journal import EntryLine, EntryType, Journal, JournalEntry
from marketbooks.ledger import Ledger, LedgerEntry
from marketbooks.numeric import Decimal
from marketbooks.report import TrialBalance
from marketbooks.statements import CashFlowStatement, IncomeStatement

journal = Journal("Main Journal")
journal.add_entry(JournalEntry(
    "TRX001",
    [
        EntryLine("ACC001", EntryType.DEBIT, Decimal(1000), "Revenue received"),
        EntryLine("ACC003", EntryType.CREDIT, Decimal(1000), "Revenue recorded"),
    ],
    "Revenue transaction",
))

ledger = Ledger("Main Ledger")
for entry in journal.entries:
    for line in entry.entries:
        ledger.add_entry(LedgerEntry(line.account_id, entry.id, line.type, line.amount))

trial = TrialBalance(ledger, [("ACC001", "Cash"), ("ACC003", "Revenue")])
trial.generate(sys.stdout)
print(trial.is_balanced())

cash = CashFlowStatement(ledger, [("ACC001", "Cash")], [("ACC001", "Cash")])
print(cash.render())
```

### Journal

- `JournalEntry(transaction_id, entries, description="")` checks its lines. It
  raises `ValueError` if there are no lines, if any amount is not positive, or
  if total debits differ from total credits.
- `Journal.add_entry` indexes each entry by account and by transaction.
- You can look entries up with `entries_by_account`, `entries_by_transaction`
  and `entries_by_date_range(start, end)`. The date range includes both ends.

### Ledger

- `Ledger.balance(account_id, as_of=None)` returns debits minus credits posted
  up to `as_of`. If `as_of` is not given, it uses the current time.
- `Ledger.entries(account_id, start=None, end=None)` lists the postings for an
  account.
- Timestamps are timezone-aware UTC `datetime` values. Pass aware datetimes
  when you filter by time.

### Reports

Every report derives from `marketbooks.report.Report`. It has a `name`, a
`generate(out)` method that writes text to a stream, and a `render()` method
that returns the same text as a string.

When `show_empty_accounts` is false, which is the default, accounts with a zero
balance are left out.

- `TrialBalance(ledger, accounts, show_empty_accounts=False)` shows each
  account in one of two columns:
  - A balance of zero or more is shown as a debit.
  - A negative balance is shown as a credit.

  It exposes `lines`, `total_debits`, `total_credits` and `is_balanced()`.
- `IncomeStatement(ledger, revenue_accounts, expense_accounts, show_empty_accounts=False)`
  uses the ledger's debit-minus-credit balances:
  - A revenue account is listed only if its balance is positive.
  - An expense account is listed only if its balance is negative, and its
    amount is then the negated balance.

  It exposes `revenue_lines`, `expense_lines`, `total_revenue`,
  `total_expenses` and `net_income`.
- `CashFlowStatement(ledger, inflow_accounts, outflow_accounts, show_empty_accounts=False)`
  follows the same rules:
  - Inflow accounts are listed when their balance is positive.
  - Outflow accounts are listed when their balance is negative.

  It exposes `inflow_lines`, `outflow_lines`, `total_inflows`,
  `total_outflows` and `net_cash_flow`.
- `marketbooks.balance_sheet.BalanceSheet(name, ledger, as_of)` works
  differently:
  - Add accounts with `add_asset_account`, `add_liability_account` and
    `add_equity_account`.
  - Each account takes its ledger balance as of `as_of`.
  - The sheet has `assets`, `liabilities` and `equity` sections, their
    totals, and `is_balanced()`.
  - It has no text output.

### Other modules

- `marketbooks.numeric.Decimal` is an amount backed by a `float`.
  - Equality and ordering allow a tolerance of `1e-10`.
  - Division by zero raises `ZeroDivisionError`.
  - `str()` uses the general `g` format, so `Decimal(1000)` prints as `1000`.
  - A string is parsed from its leading number. A string with no leading
    number raises `ValueError`.
- `marketbooks.ids.IDGenerator(prefix, digits)` makes sequential, zero-padded,
  prefixed identifiers and is safe to use from several threads. Each model
  class has its own generator, with IDs such as `JEN000000000001` or
  `ACC000000001`.
- `marketbooks.holdings` has `Asset` and `Liability`.
  - Their values cannot be negative.
  - `current_value()` asks a strategy for the value. An asset uses
    `CashAssetStrategy` when no strategy is set, and a liability uses
    `LoanLiabilityStrategy`.
  - Every strategy that comes with the package returns the recorded value.
- `marketbooks.transaction.Transaction.process()` applies a transaction to its
  asset and liability:
  - `DEPOSIT` adds to the asset.
  - `WITHDRAWAL` takes from the asset.
  - `TRANSFER` moves value from the asset to the liability.
  - `TRADE` adds to the asset and takes from the liability.

  Errors raise `RuntimeError`, for example on insufficient funds.
- `marketbooks.wallet.Wallet(currency)` takes a three-letter currency code.
  - Its balance goes up with deposits and down with withdrawals.
  - Transfers and trades do not change the balance; they are only marked as
    completed.
- `marketbooks.account.Account(name, account_type)` holds wallets, assets,
  liabilities and contracts by ID.
  - Adding an ID that is already there raises `ValueError`.
  - `balance()` sums the wallet net worths. The sum is negated for liability,
    equity and revenue accounts.
- `marketbooks.contract.Contract(contract_type, party1, party2)` is an
  agreement between two different accounts.
  - It starts in the `DRAFT` state.
  - `validate_terms()` requires the `amount` and `currency` terms, and an
    amount that parses to a positive number.

## What it does not do

- All books are kept in memory. The package has no storage, database or file
  format for journals, ledgers or accounts.
- Amounts use floating point with a comparison tolerance, not exact decimal
  arithmetic.
- The only command is the fixed demo above. There is no interface for entering
  your own transactions.