"""City lookup orchestration."""
