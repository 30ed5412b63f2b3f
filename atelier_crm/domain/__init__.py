"""Domain layer of the CRM."""
