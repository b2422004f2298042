from typing import Any


def scope_from_host(host: str) -> str:
    """
    Top level site for a host: woot.adobe.com -> adobe.com.
    Hosts with fewer than two labels are returned whole.
    """
    return ".".join(host.split(".")[-2:])


def current_scope(page: Any) -> str:
    return scope_from_host(getattr(page, "host", "") or "")
