"""Wire format constants."""

SYNC_BYTE = 0xA4
MAX_DATA_LENGTH = 56  # protocol ceiling on payload bytes
HEADER_SIZE = 3  # sync, length, message id
CHECKSUM_SIZE = 1
MIN_FRAME_SIZE = 5
