"""User interface integrations for linepager."""
