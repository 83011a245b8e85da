"""Internal constants shared across the library."""

DEFAULT_HOST = "127.0.0.1"

# ------------------------------------------------------------------
# Wire format
# ------------------------------------------------------------------

#: Largest content a single length byte can describe.
MAX_CONTENT_LENGTH = 255

#: Default bound on the bytes (length headers + contents) of one message.
DEFAULT_MAX_MESSAGE_SIZE = 512

KEY_MSGTYPE = b"MSGTYPE"
KEY_TRAM_ID = b"TRAM_ID"
KEY_VALUE = b"VALUE"

#: Keys of one message, in the only order the server sends them.
MESSAGE_KEYS: tuple[bytes, ...] = (KEY_MSGTYPE, KEY_TRAM_ID, KEY_VALUE)

# ------------------------------------------------------------------
# Value limits
# ------------------------------------------------------------------

#: Passenger counts must fit a signed 32-bit integer.
MAX_PASSENGER_COUNT = 2**31 - 1

# ------------------------------------------------------------------
# Terminal
# ------------------------------------------------------------------

#: Cursor home followed by erase display.
CLEAR_SCREEN = "\x1b[H\x1b[2J"
