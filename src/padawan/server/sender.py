"""Write a finished Reply to an output stream.

The process surface is deliberately thin: the body goes to the stream
(standard output by default) and nothing else is emitted.
"""

import sys
from typing import TextIO

from padawan.http.response import Reply


def send_reply(reply: Reply, stream: TextIO | None = None) -> None:
    """Write *reply*'s body to *stream* and flush it."""
    out = sys.stdout if stream is None else stream
    out.write(reply.body)
    out.flush()
