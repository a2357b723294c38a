import logging

from . import infostring
from .errors import DecodeError
from .packets import wrap


logger = logging.getLogger(__name__)


# Placeholder; the challenge echoed back in infoResponse is not checked
GETINFO_CHALLENGE = 'xxx'


def build_getinfo_request():
    return wrap('getinfo', GETINFO_CHALLENGE.encode('ascii'))


def decode_info_response(payload):
    try:
        return infostring.decode(payload)
    except DecodeError as e:
        logger.debug(f"Dropping malformed infoResponse: {e}")
        return None
