"""Double-entry bookkeeping: journals, ledgers, financial reports and simple market models."""

__version__ = "0.1.0"