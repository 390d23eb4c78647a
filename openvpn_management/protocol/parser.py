from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from openvpn_management.model import Client, Status
from . import defs
from .errors import MalformedResponseError
from .lines import LineKind, classify, parse_client_line, parse_time_line, parse_title_line


class StatusParser:
    """
    Assembles a Status from a complete `status` response body.

    One linear pass over the lines. A Status is only returned when the title,
    the timestamp and the client-list header were all seen; any decode or
    shape error aborts the whole parse.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._log = logger or logging.getLogger(__name__)

    # ---------------- Public API ----------------
    def parse(self, response: str) -> Status:
        clients: List[Client] = []
        title: Optional[str] = None
        timestamp: Optional[datetime] = None
        has_client_list = False
        dropped = 0

        lines = response.split(defs.LINE_SEP)
        for line in lines:
            kind = classify(line)

            if kind is LineKind.HEADER_CLIENT_LIST:
                has_client_list = True
            elif kind is LineKind.CLIENT_LIST:
                client = parse_client_line(line)
                if client.name == defs.UNDEF:
                    dropped += 1
                    continue
                clients.append(client)
            elif kind is LineKind.TITLE:
                # last one wins
                title = parse_title_line(line)
            elif kind is LineKind.TIME:
                timestamp = parse_time_line(line)

        if not has_client_list or title is None or timestamp is None:
            self._log.debug(
                "Incomplete status response: header=%s title=%s time=%s",
                has_client_list,
                title is not None,
                timestamp is not None,
            )
            raise MalformedResponseError(response)

        self._log.debug(
            "Parsed status: lines=%d clients=%d undef_dropped=%d",
            len(lines),
            len(clients),
            dropped,
        )
        return Status(title=title, timestamp=timestamp, clients=tuple(clients))


def parse_status(response: str, logger: Optional[logging.Logger] = None) -> Status:
    """Parse a full `status` response body into a Status."""
    return StatusParser(logger).parse(response)
