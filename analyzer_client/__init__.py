"""Framework-free core of the document analyzer client."""
