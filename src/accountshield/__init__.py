"""Request validation and user projection for the account service boundary."""
