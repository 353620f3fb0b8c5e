"""Caller identification for the HTTP boundary."""

from plantcert.api.auth.caller import CALLER_HEADER, get_caller_address

__all__: list[str] = ["CALLER_HEADER", "get_caller_address"]
