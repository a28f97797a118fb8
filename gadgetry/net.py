"""Helpers for common networking needs."""

from __future__ import annotations

import socket
import urllib.error
import urllib.request
from typing import BinaryIO

from gadgetry.fs import save_to_file


def host_name() -> str:
    """Return this machine's host name, or ``localhost`` if it has none."""
    try:
        name = socket.gethostname()
    except OSError:
        name = ""
    return name or "localhost"


def addr(protocol: str, tcp_addr: str) -> str:
    """Return a human-readable URL for the TCP address ``tcp_addr``.

    ``addr("http", ":8080")`` gives ``http://localhost:8080`` on a host
    named ``localhost``; a port equal to ``protocol`` is dropped, so
    ``addr("https", "demomachine:https")`` gives ``https://demomachine``.
    """
    parts = tcp_addr.split(":")
    if not parts[0]:
        parts[0] = host_name()
    if len(parts) > 1:
        if parts[1] == protocol:
            parts[1] = ""
        if not parts[1]:
            parts = parts[:1]
    full = ":".join(parts)
    if protocol:
        full = f"{protocol}://{full}"
    return full


def open_remote_file(src_file_url: str) -> BinaryIO:
    """Open ``src_file_url`` and return its body as a readable binary stream.

    Responses with an error status are returned too, as their body.
    """
    try:
        return urllib.request.urlopen(src_file_url)
    except urllib.error.HTTPError as err:
        return err


def download_file(src_file_url: str, dst_file_path: str) -> None:
    """Download ``src_file_url`` into the local file ``dst_file_path``."""
    with open_remote_file(src_file_url) as src:
        save_to_file(src, dst_file_path)