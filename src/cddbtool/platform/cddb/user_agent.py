"""Where: src/cddbtool/platform/cddb/user_agent.py
What: Build the User-Agent sent to CDDB servers.
Why: Keep the product token format in one place.
"""

from __future__ import annotations


def format_user_agent(app_name: str, app_version: str) -> str:
    """Return ``App/Version``, or just ``App`` when the version is blank."""

    name = app_name.strip()
    version = app_version.strip()
    if version:
        return f"{name}/{version}"
    return name


__all__ = ["format_user_agent"]
