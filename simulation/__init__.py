"""Run orchestration: catalog loading, portfolio ledger, session runner and output logging."""
