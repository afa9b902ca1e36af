"""budgetgraph — graph analysis engine for a personal budgeting application."""

__version__ = "0.3.0"
