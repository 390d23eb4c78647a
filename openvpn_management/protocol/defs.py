# openvpn_management/protocol/defs.py
"""
Wire constants of the management interface `status` exchange.
"""

from __future__ import annotations

STATUS_COMMAND = b"status\n"
ENDING = "END"

FIELD_SEP = "\t"
LINE_SEP = "\n"

HEADER_CLIENT_LIST = "HEADER\tCLIENT_LIST"
CLIENT_LIST = "CLIENT_LIST"
TITLE = "TITLE"
TIME = "TIME"

# minimum tab-separated fields per record, tag included
CLIENT_LIST_MIN_FIELDS = 9
TITLE_MIN_FIELDS = 2
TIME_MIN_FIELDS = 3

# CLIENT_LIST field positions (0 is the tag)
CL_NAME = 1
CL_REAL_ADDRESS = 2
CL_BYTES_RECEIVED = 5
CL_BYTES_SENT = 6
CL_CONNECTED_SINCE = 8

TITLE_TEXT = 1
TIME_EPOCH = 2

# common name of a connection that has not authenticated yet
UNDEF = "UNDEF"

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
