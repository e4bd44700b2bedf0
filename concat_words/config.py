import logging
import os
import string

# ================================
# CONFIG
# ================================
ALPHABET = string.ascii_lowercase   # the only characters a dictionary word may use
LINE_TERMINATORS = "\r\n"           # stripped from the end of every input line
DEFAULT_ENCODING = "utf-8"          # used to decode uploaded word lists
NONE_FOUND = "NULL"                 # printed in place of a missing longest/2nd word

# Runtime knobs, overridable from the environment.
STRICT_WORDS = os.environ.get("CONCAT_WORDS_STRICT", "").lower() in ("1", "true", "yes", "on")
LOG_LEVEL = os.environ.get("CONCAT_WORDS_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=None):
  """Install a root handler for front-ends; the library itself only creates loggers."""
  level = level or LOG_LEVEL
  if isinstance(level, str):
    name = level.upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
      raise ValueError(f"unknown log level: {name!r}")
  logging.basicConfig(level=level, format=LOG_FORMAT)
  return level
