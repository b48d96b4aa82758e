"""Prefix tokens recognized by command parsers."""

from __future__ import annotations

from carebook.parsing.tokenizer import Prefix

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_ROLE = Prefix("role/")
PREFIX_TAG = Prefix("tag/")
PREFIX_START_DATE = Prefix("startdate/")
PREFIX_START_TIME = Prefix("start/")
PREFIX_END_DATE = Prefix("enddate/")
PREFIX_END_TIME = Prefix("end/")

DATE_FORMAT = "dd/MM/yyyy"
TIME_FORMAT = "HH:mm"
