"""Shared regular expressions for contact validation."""

from __future__ import annotations

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
"""Regex matching a ``local@domain.tld`` shaped address."""

PHONE_PATTERN = re.compile(r"^[+]?[(]?[0-9]{1,4}[)]?[-\s./0-9]{7,15}$")
"""Permissive international phone number: optional ``+`` and area-code parentheses."""
