from marketbooks.journal import EntryType
from marketbooks.ledger import Ledger, LedgerEntry
from marketbooks.numeric import Decimal
from marketbooks.statements import CashFlowStatement, IncomeStatement, StatementLine


def _post(ledger, account_id, entry_type, amount):
    ledger.add_entry(LedgerEntry(account_id, "JEN-TEST", entry_type, Decimal(amount)))


def _ledger():
    ledger = Ledger("Statements")
    _post(ledger, "ACC010", EntryType.DEBIT, 800)
    _post(ledger, "ACC020", EntryType.CREDIT, 300)
    _post(ledger, "ACC030", EntryType.CREDIT, 1000)
    _post(ledger, "ACC040", EntryType.DEBIT, 500)
    return ledger


def test_income_statement_sections():
    statement = IncomeStatement(
        _ledger(),
        [("ACC010", "Sales"), ("ACC030", "Credited revenue")],
        [("ACC020", "Costs"), ("ACC040", "Debited expense")],
    )
    assert statement.revenue_lines == [StatementLine("ACC010", "Sales", Decimal(800))]
    assert statement.expense_lines == [StatementLine("ACC020", "Costs", Decimal(300))]
    assert statement.total_revenue == Decimal(800)
    assert statement.total_expenses == Decimal(300)
    assert statement.net_income == statement.total_revenue - statement.total_expenses


def test_income_statement_empty_accounts_never_listed():
    statement = IncomeStatement(
        _ledger(), [("ACC999", "Unused")], [("ACC998", "Unused")], show_empty_accounts=True
    )
    assert statement.revenue_lines == []
    assert statement.expense_lines == []
    assert statement.net_income == Decimal(0)


def test_income_statement_render():
    statement = IncomeStatement(_ledger(), [("ACC010", "Sales")], [("ACC020", "Costs")])
    lines = statement.render().split("\n")
    assert statement.name == "Income Statement"
    assert lines[1] == "INCOME STATEMENT"
    assert len(lines[2]) == 56
    assert lines[3] == "-" * 56
    assert lines[4] == "REVENUE"
    assert lines[5] == f"{'ACC010':<16}{'Sales':<24}{'800':>16}"
    assert lines[7] == f"{'Total Revenue':<40}{'800':>16}"
    assert lines[9] == "EXPENSES"
    assert lines[10] == f"{'ACC020':<16}{'Costs':<24}{'300':>16}"
    assert lines[12] == f"{'Total Expenses':<40}{'300':>16}"
    assert lines[14].startswith("Net Income")
    assert lines[14].split()[-1] == str(statement.net_income)


def test_cash_flow_statement_sections():
    ledger = _ledger()
    statement = CashFlowStatement(
        ledger, [("ACC010", "Cash"), ("ACC020", "Bank")], [("ACC020", "Bank"), ("ACC010", "Cash")]
    )
    assert statement.inflow_lines == [StatementLine("ACC010", "Cash", Decimal(800))]
    assert statement.outflow_lines == [StatementLine("ACC020", "Bank", Decimal(300))]
    assert statement.net_cash_flow == statement.total_inflows - statement.total_outflows


def test_cash_flow_same_account_both_sides():
    statement = CashFlowStatement(_ledger(), [("ACC040", "Cash")], [("ACC040", "Cash")])
    assert statement.total_inflows == Decimal(500)
    assert statement.outflow_lines == []
    assert statement.net_cash_flow == Decimal(500)


def test_cash_flow_render_headings_in_order():
    statement = CashFlowStatement(_ledger(), [("ACC010", "Cash")], [("ACC020", "Bank")])
    text = statement.render()
    assert statement.name == "Cash Flow Statement"
    positions = [
        text.index(label)
        for label in (
            "CASH FLOW STATEMENT",
            "CASH INFLOWS",
            "Total Inflows",
            "CASH OUTFLOWS",
            "Total Outflows",
            "Net Cash Flow",
        )
    ]
    assert positions == sorted(positions)
    assert text.endswith(f"{'Net Cash Flow':<40}{str(statement.net_cash_flow):>16}\n")