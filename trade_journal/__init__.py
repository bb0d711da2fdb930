"""Trade journal: calendar, monthly and dashboard stats, account balance, AI coach."""

__version__ = "0.1.0"
