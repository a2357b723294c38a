import logging
import re
import sys

from . import session
from .display import print_header, print_server
from .errors import ResolutionError, TransportError, UsageError
from .session import QueryRequest, QuerySession
from .settings import UDP_TIMEOUT, configure_logging, load_settings


logger = logging.getLogger(__name__)


USAGE = """\
Retrieves and displays a list of servers from a Quake III Arena compatible
master server.

Usage: q3serverlist <hostname> <port> <protocol> [params...]

  hostname    Hostname of the master server to query.
  port        Port of the master server to query.
  protocol    Protocol number to use for the request.
  params      Extra parameters to send to the master server.

Example: q3serverlist masterjk3.ravensoft.com 29060 26
         Retrieves all the Jedi Academy 1.01 servers from Ravensoft's official
         master server.
"""

WHITESPACE = re.compile(r'\s')
DIGITS = re.compile(r'[0-9]+')


def _parse_int(value):
    if not DIGITS.fullmatch(value):
        return None
    return int(value)


def parse_arguments(args):
    if len(args) < 3:
        raise UsageError(USAGE, exit_code=0)

    hostname = args[0]

    port = _parse_int(args[1])
    if port is None or not 1 <= port <= 65535:
        raise UsageError("The port number must be between 1 and 65535.")

    protocol = _parse_int(args[2])
    if protocol is None or protocol <= 0:
        raise UsageError("The protocol number must be a positive integer.")

    for param in args[3:]:
        if WHITESPACE.search(param):
            raise UsageError(f"Query parameters cannot contain spaces: '{param}'")

    return QueryRequest(hostname, port, protocol, tuple(args[3:]))


def run_query(request, settings, on_record=print_server):
    context = session.open_session(request, timeout=UDP_TIMEOUT)
    print(f"Requesting servers from {request.master_host}:{request.master_port}...")
    print_header()
    query = QuerySession(context, on_record, timeout=UDP_TIMEOUT, buffer_size=settings.buffer_size)
    return query.run()


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    configure_logging()
    settings = load_settings()
    configure_logging(settings.log_level)

    print()
    try:
        request = parse_arguments(args)
    except UsageError as e:
        print(e.message)
        return e.exit_code

    try:
        run_query(request, settings)
    except (ResolutionError, TransportError) as e:
        logger.error(f"Query of {request.master_host}:{request.master_port} failed: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
