"""Command objects, one module per command word."""

MESSAGE_INVALID_PERSON_INDEX = "The person index provided is invalid"
